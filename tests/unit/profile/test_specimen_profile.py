"""
Test half-profile generation.

This module verifies transition lengths, the total length identity,
x-monotonic ordering and the shape of the eased transition.
"""

import math
import pytest
import numpy as np

from specimen_policies import ProfilePolicy
from specimen.core.types import SpecimenParams
from specimen.ops.profile import compute_transition_length, generate_profile


def _params(**overrides):
    base = dict(
        grip_length=50.0,
        grip_diameter=15.0,
        gauge_length=30.0,
        gauge_diameter=7.0,
        fillet_radius=70.0,
    )
    base.update(overrides)
    return SpecimenParams(**base)


class TestTransitionLength:
    """Transition length heuristics."""

    def test_non_tapered_uses_fillet_term(self):
        """max((7.5 - 3.5) * 4, 70 * 1.2) = 84."""
        assert compute_transition_length(_params()) == pytest.approx(84.0)

    def test_non_tapered_uses_radius_term(self):
        """A small fillet leaves the radius-difference term dominant."""
        params = _params(fillet_radius=5.0)
        assert compute_transition_length(params) == pytest.approx(16.0)

    def test_tapered_example(self):
        """4 / tan(8 deg) is about 28.45."""
        params = _params(use_tapered_transition=True, taper_angle=8.0)
        length = compute_transition_length(params)
        assert length == pytest.approx(4.0 / math.tan(math.radians(8.0)))
        assert length == pytest.approx(28.46, abs=0.01)

    def test_tapered_angle_is_clamped(self):
        """A zero taper angle is clamped instead of dividing by zero."""
        params = _params(use_tapered_transition=True, taper_angle=0.0)
        expected = 4.0 / math.tan(math.radians(7.0))
        assert compute_transition_length(params) == pytest.approx(expected)

    def test_tapered_angle_clamped_from_above(self):
        """Angles above the domain use the upper bound."""
        params = _params(use_tapered_transition=True, taper_angle=180.0)
        expected = 4.0 / math.tan(math.radians(10.0))
        assert compute_transition_length(params) == pytest.approx(expected)

    def test_custom_policy_constants(self):
        """Heuristic multipliers come from the policy."""
        policy = ProfilePolicy(radius_diff_multiplier=10.0, fillet_multiplier=0.1)
        assert compute_transition_length(_params(), policy) == pytest.approx(40.0)


class TestGenerateProfile:
    """Profile points and derived lengths."""

    def test_total_length_example(self):
        """2*50 + 30 + 2*84 = 298."""
        profile = generate_profile(_params())
        assert profile.transition_length == pytest.approx(84.0)
        assert profile.total_length == pytest.approx(298.0)

    @pytest.mark.parametrize("tapered", [False, True])
    @pytest.mark.parametrize("grip_d,gauge_d,fillet", [
        (15.0, 7.0, 70.0),
        (16.0, 6.35, 70.0),
        (20.0, 12.5, 50.0),
        (12.0, 4.0, 1.0),
    ])
    def test_points_are_x_monotonic(self, tapered, grip_d, gauge_d, fillet):
        """Points never step backwards along the axis."""
        params = _params(
            grip_diameter=grip_d,
            gauge_diameter=gauge_d,
            fillet_radius=fillet,
            use_tapered_transition=tapered,
        )
        profile = generate_profile(params)
        xs = profile.as_array()[:, 0]
        assert np.all(np.diff(xs) >= 0)
        assert profile.total_length == pytest.approx(
            2 * params.grip_length + params.gauge_length + 2 * profile.transition_length
        )

    def test_tips_lie_on_axis(self):
        """First and last points sit on the axis at +/- total/2."""
        profile = generate_profile(_params())
        first, last = profile.points[0], profile.points[-1]
        assert (first.x, first.y) == pytest.approx((-149.0, 0.0))
        assert (last.x, last.y) == pytest.approx((149.0, 0.0))

    def test_radii_are_non_negative(self):
        """All points lie in the upper half plane."""
        pts = generate_profile(_params()).as_array()
        assert np.all(pts[:, 1] >= 0)

    def test_profile_is_mirror_symmetric(self):
        """Reversing the points and negating x gives the same outline."""
        pts = generate_profile(_params()).as_array()
        mirrored = pts[::-1].copy()
        mirrored[:, 0] *= -1
        np.testing.assert_allclose(pts, mirrored, atol=1e-9)

    def test_non_tapered_has_interior_samples(self):
        """19 interior samples per transition plus 8 fixed points."""
        profile = generate_profile(_params())
        assert len(profile.points) == 8 + 2 * 19

    def test_tapered_has_no_interior_samples(self):
        """A tapered transition is a single straight segment."""
        profile = generate_profile(_params(use_tapered_transition=True))
        assert len(profile.points) == 8

    def test_transition_radius_is_monotone_between_radii(self):
        """The eased curve stays between the grip and gauge radii."""
        profile = generate_profile(_params())
        pts = profile.as_array()
        left = pts[2:2 + 21]
        assert np.all(np.diff(left[:, 1]) <= 1e-12)
        assert left[0, 1] == pytest.approx(7.5)
        assert left[-1, 1] == pytest.approx(3.5)

    def test_transition_is_flat_at_both_ends(self):
        """Cosine easing gives near zero slope next to grip and gauge."""
        pts = generate_profile(_params()).as_array()
        left = pts[2:2 + 21]
        first_slope = abs((left[1, 1] - left[0, 1]) / (left[1, 0] - left[0, 0]))
        mid_slope = abs((left[11, 1] - left[10, 1]) / (left[11, 0] - left[10, 0]))
        last_slope = abs((left[-1, 1] - left[-2, 1]) / (left[-1, 0] - left[-2, 0]))
        assert first_slope < 0.2 * mid_slope
        assert last_slope < 0.2 * mid_slope

    def test_gauge_section_is_flat(self):
        """The gauge section runs at the gauge radius between +/- L/2."""
        profile = generate_profile(_params())
        gauge = [p for p in profile.points if abs(p.x) <= 15.0 + 1e-9]
        assert gauge
        assert all(p.y == pytest.approx(3.5) for p in gauge)

    def test_full_silhouette_is_closed_outline(self):
        """The silhouette mirrors the upper half below the axis."""
        profile = generate_profile(_params())
        silhouette = profile.full_silhouette()
        assert len(silhouette) == 2 * len(profile.points) - 1
        assert silhouette[:, 1].min() == pytest.approx(-7.5)

    def test_non_positive_length_raises(self):
        """Grip and gauge lengths must be positive."""
        with pytest.raises(ValueError):
            generate_profile(_params(gauge_length=0.0))

    def test_profile_serializes(self):
        """to_dict exposes points as x/y dicts."""
        d = generate_profile(_params()).to_dict()
        assert d["total_length"] == pytest.approx(298.0)
        assert d["points"][0] == {"x": pytest.approx(-149.0), "y": 0.0}


class TestRevolveProfile:
    """Outer solid built by revolving the profile."""

    def test_revolved_solid_spans_total_length(self):
        """The revolved solid lies along +X with the grip radius."""
        from specimen.ops.profile import revolve_profile

        profile = generate_profile(_params(grip_length=10.0, gauge_length=6.0, fillet_radius=10.0))
        solid = revolve_profile(profile, sections=32)

        extents = solid.bounds[1] - solid.bounds[0]
        assert extents[0] == pytest.approx(profile.total_length, rel=1e-6)
        assert extents[1] == pytest.approx(15.0, rel=0.01)
        assert solid.volume > 0
