"""
Mesh builders for lattice primitives and the gauge cylinder.
"""

from .meshes import (
    create_strut_mesh,
    create_node_mesh,
    create_gauge_cylinder,
)

__all__ = [
    "create_strut_mesh",
    "create_node_mesh",
    "create_gauge_cylinder",
]
