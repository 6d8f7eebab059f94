"""
Primitive solids produced by the lattice generator.

Primitives are lightweight, immutable descriptors. Triangle meshes are only
realized (``to_mesh``) for the primitives the combiner actually consumes, so
large lattices cost nothing until a Boolean operation needs them.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from dataclasses import dataclass
from typing import Tuple, Dict, Any, Union, Literal, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import trimesh

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class NodePrimitive:
    """Sphere centered on a lattice node."""
    center: Vec3
    radius: float
    subdivisions: int = 1

    kind: Literal["node"] = "node"

    def anchor_points(self) -> Tuple[Vec3, ...]:
        return (self.center,)

    def to_mesh(self) -> "trimesh.Trimesh":
        from ..ops.primitives.meshes import create_node_mesh
        return create_node_mesh(self.center, self.radius, subdivisions=self.subdivisions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "center": list(self.center),
            "radius": self.radius,
        }


@dataclass(frozen=True)
class StrutPrimitive:
    """
    Oriented cylinder between two points.

    ``role`` distinguishes load-path struts from through holes; both are
    realized the same way and differ only in how they are reported.
    """
    start: Vec3
    end: Vec3
    radius: float
    sections: int = 8
    role: Literal["strut", "hole"] = "strut"

    kind: Literal["strut"] = "strut"

    @property
    def length(self) -> float:
        return float(np.linalg.norm(np.subtract(self.end, self.start)))

    def anchor_points(self) -> Tuple[Vec3, ...]:
        return (self.start, self.end)

    def to_mesh(self) -> "trimesh.Trimesh":
        from ..ops.primitives.meshes import create_strut_mesh
        return create_strut_mesh(self.start, self.end, self.radius, segments=self.sections)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "role": self.role,
            "start": list(self.start),
            "end": list(self.end),
            "radius": self.radius,
        }


Primitive = Union[NodePrimitive, StrutPrimitive]


__all__ = [
    "NodePrimitive",
    "StrutPrimitive",
    "Primitive",
]
