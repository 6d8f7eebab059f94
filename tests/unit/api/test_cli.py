"""
Test the command-line interface.
"""

import functools
import json

import pytest

from specimen import cli
from specimen.cli import main
from specimen_policies import OutputPolicy


class TestCli:
    """Subcommand dispatch and exit codes."""

    def test_no_command_prints_help(self, capsys):
        """Running without a command shows help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_template_single(self, capsys):
        """A named template is printed as JSON."""
        assert main(["template", "E606"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert list(data) == ["E606"]
        assert data["E606"]["gauge_diameter"] == pytest.approx(6.35)

    def test_template_all(self, capsys):
        """Without a name every standard is printed."""
        assert main(["template"]) == 0
        assert set(json.loads(capsys.readouterr().out)) == {"E466", "E606", "E8"}

    def test_validate_valid(self, capsys):
        """A standard template validates."""
        assert main(["validate", "--standard", "E466"]) == 0
        assert "meets ASTM standards" in capsys.readouterr().out

    def test_validate_invalid(self, capsys):
        """An invalid design exits with status 2."""
        assert main(["validate", "--gauge-diameter", "20"]) == 2
        assert "Gauge diameter must be smaller" in capsys.readouterr().out

    def test_params_file(self, tmp_path, capsys):
        """camelCase JSON parameters override the template."""
        params_file = tmp_path / "params.json"
        params_file.write_text(json.dumps({"gaugeLength": 100.0}))

        assert main(["validate", "--standard", "E606", "--params", str(params_file)]) == 2
        assert "between 1.5 and 3 times" in capsys.readouterr().out

    def test_estimate(self, capsys):
        """The estimate command prints the volume breakdown."""
        assert main(["estimate", "--lattice", "vertical"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["void_fraction"] > 0
        assert data["actual_volume"] < data["solid_volume"]

    def test_generate_step_writes_dump(self, tmp_path):
        """STEP output falls back to a parameter dump."""
        assert main(["generate", "--format", "step", "--output", str(tmp_path)]) == 0
        assert (tmp_path / "run" / "specimen.step").exists()

    def test_generate_uses_policy_mesh_format(self, tmp_path, monkeypatch):
        """Without --format the output policy's mesh format is written."""
        monkeypatch.setattr(cli, "OutputPolicy", functools.partial(OutputPolicy, mesh_format="ply"))

        assert main(["generate", "--output", str(tmp_path)]) == 0
        assert (tmp_path / "run" / "gauge_section.ply").exists()
        assert not (tmp_path / "run" / "gauge_section.stl").exists()
