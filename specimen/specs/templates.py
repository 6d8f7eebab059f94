"""
Default specimen dimensions for common fatigue and tension test standards.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from typing import Dict, Any, List

from ..core.types import SpecimenParams

_SHARED_DEFAULTS: Dict[str, Any] = {
    "transition_type": "spline",
    "use_tapered_transition": False,
    "taper_angle": 8.0,
    "lattice_type": "none",
    "lattice_size": 2.0,
    "lattice_thickness": 0.5,
    "lattice_offset": 0.5,
}

STANDARD_TEMPLATES: Dict[str, Dict[str, float]] = {
    # ASTM E466, force-controlled constant amplitude fatigue
    "E466": {
        "grip_length": 50.0,
        "grip_diameter": 15.0,
        "gauge_length": 25.0,
        "gauge_diameter": 8.0,
        "fillet_radius": 60.0,
    },
    # ASTM E606, strain-controlled fatigue
    "E606": {
        "grip_length": 45.0,
        "grip_diameter": 16.0,
        "gauge_length": 15.0,
        "gauge_diameter": 6.35,
        "fillet_radius": 70.0,
    },
    # ASTM E8, tension testing
    "E8": {
        "grip_length": 60.0,
        "grip_diameter": 20.0,
        "gauge_length": 50.0,
        "gauge_diameter": 12.5,
        "fillet_radius": 50.0,
    },
}

_GENERIC_TEMPLATE: Dict[str, float] = {
    "grip_length": 50.0,
    "grip_diameter": 15.0,
    "gauge_length": 30.0,
    "gauge_diameter": 8.0,
    "fillet_radius": 60.0,
}


def get_standard_template(standard: str) -> SpecimenParams:
    """
    Default parameters for a named standard.

    Unknown standards fall back to a generic template.
    """
    dims = STANDARD_TEMPLATES.get(standard, _GENERIC_TEMPLATE)
    return SpecimenParams(**dims, **_SHARED_DEFAULTS)


def list_standards() -> List[str]:
    return sorted(STANDARD_TEMPLATES)


__all__ = [
    "STANDARD_TEMPLATES",
    "get_standard_template",
    "list_standards",
]
