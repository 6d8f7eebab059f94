"""
Test checks run on produced solids.
"""

import pytest
import trimesh

from specimen_policies import SolidCheckPolicy
from specimen_validity import check_solid
from specimen_validity.checks import check_watertight, check_components, check_volume


class TestSolidChecks:
    """Watertight, component and volume checks."""

    def test_box_passes(self):
        """A closed box passes every check."""
        report = check_solid(trimesh.creation.box(extents=(1.0, 2.0, 3.0)))
        assert report.passed
        assert report.checks["volume"]["details"]["volume"] == pytest.approx(6.0)
        assert report.errors == []

    def test_open_mesh_fails(self):
        """Removing a face breaks watertightness."""
        box = trimesh.creation.box()
        open_box = trimesh.Trimesh(vertices=box.vertices, faces=box.faces[1:], process=False)
        assert check_watertight(open_box)["passed"] is False
        assert check_volume(open_box)["passed"] is False
        assert check_solid(open_box).passed is False

    def test_two_bodies_exceed_component_limit(self):
        """Two disjoint boxes are two components."""
        a = trimesh.creation.box()
        b = trimesh.creation.box()
        b.apply_translation((5.0, 0.0, 0.0))
        both = trimesh.util.concatenate([a, b])

        assert check_components(both)["details"]["component_count"] == 2
        assert check_solid(both).passed is False
        assert check_solid(both, SolidCheckPolicy(max_components=2)).passed is True

    def test_checks_can_be_disabled(self):
        """Disabled checks are not run."""
        report = check_solid(
            trimesh.creation.box(),
            SolidCheckPolicy(check_watertight=False, check_components=False),
        )
        assert set(report.checks) == {"volume"}
