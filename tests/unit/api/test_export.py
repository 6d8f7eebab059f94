"""
Test export of meshes, reports and parameter dumps.
"""

import json

import pytest
import trimesh

from specimen_policies import OutputPolicy, OperationReport
from specimen.core.types import SpecimenParams
from specimen.ops.profile import generate_profile
from specimen.api.export import (
    make_run_dir,
    save_mesh,
    write_json,
    format_parameter_dump,
    write_parameter_dump,
)


class TestRunDir:
    """Run directory naming."""

    def test_fixed_name(self, tmp_path):
        """The fixed convention always uses 'run'."""
        run_dir = make_run_dir(OutputPolicy(output_dir=str(tmp_path)))
        assert run_dir == tmp_path / "run"
        assert run_dir.is_dir()

    def test_custom_name(self, tmp_path):
        """An explicit run name wins."""
        run_dir = make_run_dir(OutputPolicy(output_dir=str(tmp_path)), run_name="trial")
        assert run_dir.name == "trial"

    def test_timestamped_name(self, tmp_path):
        """Timestamped runs are prefixed with 'run_'."""
        policy = OutputPolicy(output_dir=str(tmp_path), naming_convention="timestamped")
        assert make_run_dir(policy).name.startswith("run_")


class TestSaveMesh:
    """Mesh writers follow the file extension."""

    @pytest.mark.parametrize("suffix", ["stl", "ply", "obj"])
    def test_supported_formats(self, tmp_path, suffix):
        """The written file can be loaded back."""
        path = save_mesh(trimesh.creation.box(), tmp_path / f"box.{suffix}")
        assert path.exists()
        loaded = trimesh.load(str(path), force="mesh")
        assert len(loaded.faces) == 12

    def test_unsupported_format(self, tmp_path):
        """Unknown extensions are rejected."""
        with pytest.raises(ValueError, match="Unsupported mesh format"):
            save_mesh(trimesh.creation.box(), tmp_path / "box.step")


class TestReports:
    """JSON reports and text dumps."""

    def test_write_report(self, tmp_path):
        """Objects with to_dict are serialized."""
        report = OperationReport(operation="combine", metadata={"holes": 3})
        path = write_json(report, tmp_path / "reports" / "combine.json")
        data = json.loads(path.read_text())
        assert data["operation"] == "combine"
        assert data["metadata"]["holes"] == 3

    def test_parameter_dump(self, tmp_path):
        """STEP/IGES requests produce a text dump with the key dimensions."""
        params = SpecimenParams(use_tapered_transition=True, taper_angle=8.0)
        profile = generate_profile(params)

        text = format_parameter_dump(params, profile, "step")
        assert text.startswith("STEP export information:")
        assert f"Total Length: {profile.total_length:.2f} mm" in text
        assert "Tapered (8°)" in text

        path = write_parameter_dump(params, profile, tmp_path / "specimen.iges")
        assert path.read_text(encoding="utf-8").startswith("IGES export information:")
