"""
Lattice generators.

Periodic unit-cell families, the implicit gyroid sampler and the
axis-perpendicular hole families all emit lists of primitive solids.
"""

from .generate import generate_lattice
from .periodic import generate_periodic_lattice
from .implicit import generate_implicit_lattice, gyroid_field
from .perpendicular import (
    generate_perpendicular_lattice,
    station_positions,
    chord,
)

__all__ = [
    "generate_lattice",
    "generate_periodic_lattice",
    "generate_implicit_lattice",
    "gyroid_field",
    "generate_perpendicular_lattice",
    "station_positions",
    "chord",
]
