"""
Implicit-surface (gyroid) lattice sampler.

The field is evaluated as f(x, y, z) in specimen coordinates, with x the
specimen axis and y, z the cross-section. Coordinates are passed to the
field in that order, without any axis permutation.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from typing import List, Tuple, Dict, Any
import math
import numpy as np
import logging

from specimen_policies import LatticePolicy, LatticeFamilyConfig
from ...core.types import LatticeParams
from ...core.primitives import NodePrimitive, StrutPrimitive, Primitive

logger = logging.getLogger(__name__)


def gyroid_field(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    size: float,
    offset: float,
) -> np.ndarray:
    """
    Evaluate the gyroid level-set function.

    f = sin(sx)cos(sy) + sin(sy)cos(sz) + sin(sz)cos(sx) - offset,
    with s = 2 pi / size.
    """
    s = 2.0 * np.pi / size
    sx, sy, sz = s * x, s * y, s * z
    return (
        np.sin(sx) * np.cos(sy)
        + np.sin(sy) * np.cos(sz)
        + np.sin(sz) * np.cos(sx)
        - offset
    )


def generate_implicit_lattice(
    config: LatticeFamilyConfig,
    lp: LatticeParams,
    policy: LatticePolicy,
    rng: np.random.Generator,
) -> Tuple[List[Primitive], Dict[str, Any]]:
    """
    Sample the gyroid band and emit spheres plus diagonal struts.

    Grid points inside the cylinder with |f| below
    ``thickness * implicit_threshold_factor`` receive a sphere; a point whose
    (+step, +step, +step) neighbor is also in the band gets a strut to it.
    The sampler is deterministic and does not draw from ``rng``.
    """
    step = lp.size / config.implicit_resolution
    x_steps = math.ceil(lp.length / step)
    yz_steps = math.ceil(2.0 * lp.radius / step)

    xs = -lp.length / 2.0 + np.arange(x_steps) * step
    yzs = -lp.radius + np.arange(yz_steps) * step
    X, Y, Z = np.meshgrid(xs, yzs, yzs, indexing="ij")

    threshold = lp.thickness * config.implicit_threshold_factor
    in_cylinder = (np.hypot(Y, Z) <= lp.radius) & (X <= lp.length / 2.0)
    band = in_cylinder & (np.abs(gyroid_field(X, Y, Z, lp.size, lp.offset)) < threshold)

    node_idx = np.argwhere(band)
    node_radius = lp.thickness * config.implicit_node_factor
    primitives: List[Primitive] = [
        NodePrimitive(
            center=(float(xs[i]), float(yzs[j]), float(yzs[k])),
            radius=node_radius,
            subdivisions=policy.sphere_subdivisions,
        )
        for i, j, k in node_idx
    ]

    strut_radius = lp.thickness * config.implicit_strut_factor
    diagonal = step * math.sqrt(3.0)
    struts = 0
    if diagonal >= policy.min_strut_length:
        linked = band[:-1, :-1, :-1] & band[1:, 1:, 1:]
        for i, j, k in np.argwhere(linked):
            primitives.append(StrutPrimitive(
                start=(float(xs[i]), float(yzs[j]), float(yzs[k])),
                end=(float(xs[i + 1]), float(yzs[j + 1]), float(yzs[k + 1])),
                radius=strut_radius,
                sections=policy.strut_sections,
            ))
            struts += 1

    stats = {
        "samples": int(band.size),
        "step": step,
        "threshold": threshold,
        "nodes": int(len(node_idx)),
        "struts": struts,
    }
    logger.debug(f"{config.name}: {len(node_idx)} nodes, {struts} struts")

    return primitives, stats


__all__ = ["gyroid_field", "generate_implicit_lattice"]
