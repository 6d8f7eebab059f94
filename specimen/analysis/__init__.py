"""
Analytic estimates and lattice connectivity reports.
"""

from .volume import estimate_void_fraction, estimate_specimen_volume
from .topology import build_lattice_graph, lattice_topology

__all__ = [
    "estimate_void_fraction",
    "estimate_specimen_volume",
    "build_lattice_graph",
    "lattice_topology",
]
