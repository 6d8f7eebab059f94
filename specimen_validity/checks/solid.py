"""
Checks on produced solids.

Each check inspects a mesh without modifying it and returns a dict with
``passed``, ``message`` and ``details``.
"""

from typing import Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    import trimesh


def check_watertight(mesh: "trimesh.Trimesh") -> Dict[str, Any]:
    """
    Closed-surface check.

    A gauge solid must be watertight to be exported or combined further;
    ``details`` carries the Euler number for diagnosing open or
    non-manifold results.
    """
    closed = bool(mesh.is_watertight)
    return {
        "passed": closed,
        "message": "Solid is closed" if closed else "Solid has open or non-manifold edges",
        "details": {
            "is_watertight": closed,
            "is_winding_consistent": bool(mesh.is_winding_consistent),
            "euler_number": int(mesh.euler_number) if len(mesh.faces) else None,
        },
    }


def check_components(
    mesh: "trimesh.Trimesh",
    max_components: int = 1,
) -> Dict[str, Any]:
    """
    Count disconnected bodies.

    Lattice voids must not cut the gauge section into separate pieces.

    Parameters
    ----------
    mesh : trimesh.Trimesh
        Solid to inspect
    max_components : int
        Largest acceptable body count

    Returns
    -------
    dict
        ``details`` holds ``component_count`` and the face count of the
        largest bodies
    """
    bodies = mesh.split(only_watertight=False)
    count = len(bodies)
    face_counts = sorted((len(body.faces) for body in bodies), reverse=True)

    passed = count <= max_components
    return {
        "passed": passed,
        "message": (
            f"Solid is {count} connected bod{'y' if count == 1 else 'ies'}"
            + ("" if passed else f", more than the {max_components} allowed")
        ),
        "details": {
            "component_count": count,
            "max_components": max_components,
            "largest_face_counts": face_counts[:5],
        },
    }


def check_volume(mesh: "trimesh.Trimesh") -> Dict[str, Any]:
    """Check that a mesh encloses a positive volume."""
    has_faces = len(mesh.faces) > 0
    volume = float(mesh.volume) if has_faces and mesh.is_watertight else None
    passed = volume is not None and volume > 0

    return {
        "passed": passed,
        "message": (
            f"Mesh volume is {volume:.3f} mm^3" if passed
            else "Mesh does not enclose a positive volume"
        ),
        "details": {
            "volume": volume,
            "face_count": len(mesh.faces),
            "bounds": mesh.bounds.tolist() if has_faces else None,
        },
    }


__all__ = [
    "check_watertight",
    "check_components",
    "check_volume",
]
