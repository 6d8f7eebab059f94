"""
Boolean operations, lattice/cylinder combination and mesh cleanup.
"""

from .boolean import BooleanResult, boolean_union, boolean_difference
from .combiner import CombineReport, combine, union_stride, make_fallback_solid
from .repair import cleanup_mesh

__all__ = [
    "BooleanResult",
    "boolean_union",
    "boolean_difference",
    "CombineReport",
    "combine",
    "union_stride",
    "make_fallback_solid",
    "cleanup_mesh",
]
