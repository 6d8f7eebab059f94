"""
Test standard specimen templates.
"""

import pytest

from specimen.specs.templates import get_standard_template, list_standards


class TestStandardTemplates:
    """Default dimensions per standard."""

    @pytest.mark.parametrize("standard,dims", [
        ("E466", (50.0, 15.0, 25.0, 8.0, 60.0)),
        ("E606", (45.0, 16.0, 15.0, 6.35, 70.0)),
        ("E8", (60.0, 20.0, 50.0, 12.5, 50.0)),
        ("unknown", (50.0, 15.0, 30.0, 8.0, 60.0)),
    ])
    def test_template_dimensions(self, standard, dims):
        """Grip/gauge lengths and diameters plus fillet radius."""
        p = get_standard_template(standard)
        assert (
            p.grip_length, p.grip_diameter, p.gauge_length, p.gauge_diameter, p.fillet_radius
        ) == pytest.approx(dims)

    def test_shared_defaults(self):
        """Every template starts solid with a spline transition."""
        p = get_standard_template("E8")
        assert p.transition_type == "spline"
        assert p.use_tapered_transition is False
        assert p.taper_angle == 8.0
        assert p.lattice_type == "none"
        assert (p.lattice_size, p.lattice_thickness, p.lattice_offset) == (2.0, 0.5, 0.5)

    def test_list_standards(self):
        """Named standards are listed."""
        assert list_standards() == ["E466", "E606", "E8"]
