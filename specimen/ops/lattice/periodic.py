"""
Periodic unit-cell lattices (bcc, fcc, diamond, octet).

The bounding cylinder is partitioned into cubic cells of edge ``size``.
Each cell contributes the family's fractional node positions; nodes shared
by neighboring cells are merged with a KD-tree so every node and strut is
emitted once.

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


def _cell_origins(lp: LatticeParams) -> np.ndarray:
    """Lower corners of all cells covering the bounding cylinder."""
    cells_x = math.ceil(lp.length / lp.size)
    cells_yz = math.ceil(2.0 * lp.radius / lp.size)

    ix = np.arange(-cells_x / 2.0, cells_x / 2.0)
    iyz = np.arange(-cells_yz / 2.0, cells_yz / 2.0)

    grid = np.stack(np.meshgrid(ix, iyz, iyz, indexing="ij"), axis=-1)
    return grid.reshape(-1, 3) * lp.size


def _inside(points: np.ndarray, lp: LatticeParams, tol: float) -> np.ndarray:
    half = lp.length / 2.0
    radial = np.hypot(points[:, 1], points[:, 2])
    return (np.abs(points[:, 0]) <= half + tol) & (radial <= lp.radius + tol)


def generate_periodic_lattice(
    config: LatticeFamilyConfig,
    lp: LatticeParams,
    policy: LatticePolicy,
    rng: np.random.Generator,
) -> Tuple[List[Primitive], Dict[str, Any]]:
    """
    Emit node spheres and struts for a periodic unit-cell family.

    Parameters
    ----------
    config : LatticeFamilyConfig
        Node layout and bond table of the family
    lp : LatticeParams
        Bounding cylinder and density inputs
    policy : LatticePolicy
        Tessellation, minimum strut length and merge tolerance
    rng : numpy.random.Generator
        Seeded source for non-perpendicular bond inclusion

    Returns
    -------
    primitives : list
        Node spheres followed by struts
    stats : dict
        Candidate, kept and rejected counts
    """
    from scipy.spatial import cKDTree

    tol = policy.node_merge_tolerance
    origins = _cell_origins(lp)
    fractions = np.asarray(config.node_positions, dtype=float)

    candidates = (origins[:, None, :] + fractions[None, :, :] * lp.size).reshape(-1, 3)
    inside = _inside(candidates, lp, tol)
    in_bound = candidates[inside]

    stats: Dict[str, Any] = {
        "cells": int(len(origins)),
        "candidate_nodes": int(len(candidates)),
        "nodes_out_of_bounds": int(np.count_nonzero(~inside)),
    }

    if len(in_bound) == 0:
        stats.update(nodes=0, struts=0)
        return [], stats

    # merge nodes shared between neighboring cells, keeping first appearance
    tree = cKDTree(in_bound)
    keep = np.ones(len(in_bound), dtype=bool)
    for i, j in sorted(tree.query_pairs(r=tol)):
        if keep[i]:
            keep[j] = False
    nodes = in_bound[keep]
    node_tree = cKDTree(nodes)

    primitives: List[Primitive] = [
        NodePrimitive(
            center=tuple(float(c) for c in p),
            radius=config.node_radius_factor * lp.thickness,
            subdivisions=policy.sphere_subdivisions,
        )
        for p in nodes
    ]

    perpendicular_tol = 0.01 * lp.size
    seen = set()
    struts = 0
    rejected_random = 0
    rejected_bounds = 0
    rejected_short = 0

    for origin in origins:
        for bond in config.bonds:
            start = origin + fractions[bond.a] * lp.size
            end = origin + (np.asarray(bond.cell_offset, dtype=float) + fractions[bond.b]) * lp.size

            d_start, i_start = node_tree.query(start, distance_upper_bound=tol)
            d_end, i_end = node_tree.query(end, distance_upper_bound=tol)
            if not (np.isfinite(d_start) and np.isfinite(d_end)):
                rejected_bounds += 1
                continue

            key = (min(i_start, i_end), max(i_start, i_end))
            if key in seen:
                continue
            seen.add(key)

            length = float(np.linalg.norm(nodes[i_end] - nodes[i_start]))
            if length < policy.min_strut_length:
                rejected_short += 1
                continue

            perpendicular = abs(end[0] - start[0]) < perpendicular_tol
            if not perpendicular and rng.random() >= bond.probability:
                rejected_random += 1
                continue

            primitives.append(StrutPrimitive(
                start=tuple(float(c) for c in nodes[i_start]),
                end=tuple(float(c) for c in nodes[i_end]),
                radius=bond.radius_factor * lp.thickness,
                sections=policy.strut_sections,
            ))
            struts += 1

    stats.update(
        nodes=int(len(nodes)),
        struts=struts,
        struts_rejected_random=rejected_random,
        struts_rejected_bounds=rejected_bounds,
        struts_rejected_short=rejected_short,
    )
    logger.debug(f"{config.name}: {len(nodes)} nodes, {struts} struts")

    return primitives, stats


__all__ = ["generate_periodic_lattice"]
