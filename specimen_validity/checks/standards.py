"""
Parameter rules for specimen designs.

Each check returns a dict with ``passed``, ``message`` and ``details`` and
never modifies the parameters it inspects.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from typing import Dict, Any, TYPE_CHECKING

from specimen_policies import ValidationPolicy

if TYPE_CHECKING:
    from specimen.core.types import SpecimenParams


def check_diameter_order(params: "SpecimenParams") -> Dict[str, Any]:
    """Gauge diameter must be strictly smaller than grip diameter."""
    passed = params.gauge_diameter < params.grip_diameter
    return {
        "passed": passed,
        "message": (
            "Gauge diameter is smaller than grip diameter"
            if passed else
            "Gauge diameter must be smaller than grip diameter for proper stress concentration."
        ),
        "details": {
            "gauge_diameter": params.gauge_diameter,
            "grip_diameter": params.grip_diameter,
        },
    }


def check_fillet_radius(
    params: "SpecimenParams",
    policy: ValidationPolicy,
) -> Dict[str, Any]:
    """
    Minimum fillet radius for non-tapered transitions.

    The minimum is ``(grip_diameter - gauge_diameter) * min_fillet_multiplier``.
    Tapered transitions always pass.
    """
    min_radius = (params.grip_diameter - params.gauge_diameter) * policy.min_fillet_multiplier
    passed = params.use_tapered_transition or params.fillet_radius >= min_radius
    return {
        "passed": passed,
        "message": (
            "Fillet radius is sufficient"
            if passed else
            f"Fillet radius should be at least {min_radius:.1f}mm for smooth transition."
        ),
        "details": {
            "fillet_radius": params.fillet_radius,
            "min_fillet_radius": min_radius,
            "applies": not params.use_tapered_transition,
        },
    }


def check_gauge_ratio(
    params: "SpecimenParams",
    standard: str,
    policy: ValidationPolicy,
) -> Dict[str, Any]:
    """Gauge length / gauge diameter ratio bounds of the named standard."""
    ratio = params.gauge_length / params.gauge_diameter if params.gauge_diameter > 0 else float("inf")
    rule = policy.rule_for(standard)

    passed = True
    if rule is not None:
        if rule.min_ratio is not None and ratio < rule.min_ratio:
            passed = False
        if rule.max_ratio is not None and ratio > rule.max_ratio:
            passed = False

    return {
        "passed": passed,
        "message": f"Gauge ratio {ratio:.2f} is acceptable" if passed else rule.message,
        "details": {
            "ratio": ratio,
            "standard": standard,
            "rule": rule.to_dict() if rule is not None else None,
        },
    }


def check_taper_angle(
    params: "SpecimenParams",
    policy: ValidationPolicy,
) -> Dict[str, Any]:
    """Taper angle domain for tapered transitions."""
    in_range = policy.taper_angle_min <= params.taper_angle <= policy.taper_angle_max
    passed = not params.use_tapered_transition or in_range
    return {
        "passed": passed,
        "message": (
            "Taper angle is acceptable"
            if passed else
            f"Taper angle must be between {policy.taper_angle_min:g}° and "
            f"{policy.taper_angle_max:g}° for proper transition."
        ),
        "details": {
            "taper_angle": params.taper_angle,
            "applies": params.use_tapered_transition,
        },
    }


__all__ = [
    "check_diameter_order",
    "check_fillet_radius",
    "check_gauge_ratio",
    "check_taper_angle",
]
