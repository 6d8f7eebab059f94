"""
Core value types: specimen parameters, profiles and lattice primitives.
"""

from .types import (
    TransitionType,
    LatticeType,
    SpecimenParams,
    Point2D,
    Profile,
    LatticeParams,
)
from .primitives import NodePrimitive, StrutPrimitive, Primitive

__all__ = [
    "TransitionType",
    "LatticeType",
    "SpecimenParams",
    "Point2D",
    "Profile",
    "LatticeParams",
    "NodePrimitive",
    "StrutPrimitive",
    "Primitive",
]
