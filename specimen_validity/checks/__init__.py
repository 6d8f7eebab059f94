"""
Individual parameter and solid checks.
"""

from .standards import (
    check_diameter_order,
    check_fillet_radius,
    check_gauge_ratio,
    check_taper_angle,
)
from .solid import check_watertight, check_components, check_volume

__all__ = [
    "check_diameter_order",
    "check_fillet_radius",
    "check_gauge_ratio",
    "check_taper_angle",
    "check_watertight",
    "check_components",
    "check_volume",
]
