"""
Geometry operations: profile generation, lattice generation, primitive
meshes and Boolean combination.
"""

from .profile import compute_transition_length, generate_profile, revolve_profile
from .lattice import generate_lattice
from .mesh import combine, boolean_union, boolean_difference, BooleanResult

__all__ = [
    "compute_transition_length",
    "generate_profile",
    "revolve_profile",
    "generate_lattice",
    "combine",
    "boolean_union",
    "boolean_difference",
    "BooleanResult",
]
