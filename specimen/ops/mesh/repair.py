"""
Mesh cleanup applied to Boolean results.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from typing import Tuple, Dict, Any, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    import trimesh

logger = logging.getLogger(__name__)


def cleanup_mesh(mesh: "trimesh.Trimesh") -> Tuple["trimesh.Trimesh", Dict[str, Any]]:
    """
    Merge duplicate vertices and make normals point outward.

    Returns a cleaned copy together with before/after statistics; the input
    mesh is left untouched.
    """
    import trimesh

    stats = {
        "original_vertex_count": len(mesh.vertices),
        "original_face_count": len(mesh.faces),
    }

    cleaned = mesh.copy()
    cleaned.merge_vertices()
    cleaned.remove_unreferenced_vertices()

    if cleaned.is_watertight and cleaned.volume < 0:
        cleaned.invert()
    trimesh.repair.fix_normals(cleaned)

    stats.update(
        final_vertex_count=len(cleaned.vertices),
        final_face_count=len(cleaned.faces),
        final_watertight=bool(cleaned.is_watertight),
    )
    return cleaned, stats


__all__ = ["cleanup_mesh"]
