"""
Triangle mesh realization of lattice primitives and the gauge cylinder.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from typing import Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import trimesh

# struts shorter than this cannot be oriented
MIN_STRUT_LENGTH = 1e-9


def create_strut_mesh(
    start: Tuple[float, float, float],
    end: Tuple[float, float, float],
    radius: float,
    segments: int = 8,
) -> "trimesh.Trimesh":
    """
    Closed cylinder whose axis runs from ``start`` to ``end``.

    Parameters
    ----------
    start, end : tuple
        Axis end points (x, y, z) in mm; the caps lie on these points
    radius : float
        Strut radius in mm
    segments : int
        Facets around the circumference

    Returns
    -------
    trimesh.Trimesh

    Raises
    ------
    ValueError
        For a zero-length axis or a non-positive radius.
    """
    import trimesh

    segment = np.array([start, end], dtype=float)
    if np.linalg.norm(segment[1] - segment[0]) < MIN_STRUT_LENGTH:
        raise ValueError(f"Strut from {tuple(start)} to {tuple(end)} has zero length")
    if radius <= 0:
        raise ValueError(f"Strut radius ({radius}) must be positive")

    return trimesh.creation.cylinder(radius=radius, sections=segments, segment=segment)


def create_node_mesh(
    center: Tuple[float, float, float],
    radius: float,
    subdivisions: int = 1,
) -> "trimesh.Trimesh":
    """
    Icosphere on a lattice node (``subdivisions=1`` gives 80 faces).

    Raises
    ------
    ValueError
        For a non-positive radius.
    """
    import trimesh

    if radius <= 0:
        raise ValueError(f"Node radius ({radius}) must be positive")

    sphere = trimesh.creation.icosphere(subdivisions=subdivisions, radius=radius)
    sphere.apply_translation(np.asarray(center, dtype=float))
    return sphere


def create_gauge_cylinder(
    radius: float,
    length: float,
    sections: int = 32,
) -> "trimesh.Trimesh":
    """
    Solid gauge cylinder along +X, spanning x in [-length/2, length/2].

    Parameters
    ----------
    radius : float
        Gauge radius in mm
    length : float
        Gauge length in mm
    sections : int
        Facets around the circumference

    Returns
    -------
    trimesh.Trimesh
    """
    import trimesh

    half = length / 2.0
    return trimesh.creation.cylinder(
        radius=radius,
        sections=sections,
        segment=[[-half, 0.0, 0.0], [half, 0.0, 0.0]],
    )


__all__ = [
    "MIN_STRUT_LENGTH",
    "create_strut_mesh",
    "create_node_mesh",
    "create_gauge_cylinder",
]
