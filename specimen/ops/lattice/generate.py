"""
Lattice generation entry point.

Dispatches a lattice family to its generation strategy and wraps the result
in an OperationReport.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from typing import Optional, List, Tuple
import numpy as np
import logging

from specimen_policies import (
    LatticePolicy,
    OperationReport,
    get_family_config,
    apply_family_overrides,
)
from ...core.types import LatticeParams
from ...core.primitives import Primitive, NodePrimitive
from .periodic import generate_periodic_lattice
from .implicit import generate_implicit_lattice
from .perpendicular import generate_perpendicular_lattice

logger = logging.getLogger(__name__)

_STRATEGIES = {
    "periodic": generate_periodic_lattice,
    "implicit": generate_implicit_lattice,
    "perpendicular": generate_perpendicular_lattice,
}


def generate_lattice(
    lattice_type: str,
    lattice_params: LatticeParams,
    policy: Optional[LatticePolicy] = None,
) -> Tuple[List[Primitive], OperationReport]:
    """
    Generate the primitive solids of a lattice family.

    Parameters
    ----------
    lattice_type : str
        Family name (see ``specimen_policies.LATTICE_FAMILIES``)
    lattice_params : LatticeParams
        Bounding cylinder and density inputs
    policy : LatticePolicy, optional
        Seed, tessellation and filtering options

    Returns
    -------
    primitives : list of NodePrimitive / StrutPrimitive
        Empty for ``"none"``; every anchor point lies inside the cylinder
    report : OperationReport
        Counts per primitive kind and strategy statistics

    Raises
    ------
    ValueError
        If the lattice family is unknown or an override names a fixed field.
    """
    if policy is None:
        policy = LatticePolicy()

    overrides = policy.family_overrides.get(lattice_type)
    config = apply_family_overrides(get_family_config(lattice_type), overrides)

    report = OperationReport(
        operation="generate_lattice",
        requested_policy=policy.to_dict(),
        effective_policy=policy.to_dict(),
        metadata={
            "lattice_type": lattice_type,
            "strategy": config.strategy,
            "combine_mode": config.combine_mode,
            "lattice_params": lattice_params.to_dict(),
        },
    )
    if overrides:
        report.metadata["family_overrides"] = dict(overrides)

    if config.strategy == "none":
        report.metadata.update(primitive_count=0, node_count=0, strut_count=0)
        return [], report

    rng = np.random.default_rng(policy.seed)
    primitives, stats = _STRATEGIES[config.strategy](config, lattice_params, policy, rng)

    node_count = sum(1 for p in primitives if isinstance(p, NodePrimitive))
    report.metadata.update(
        primitive_count=len(primitives),
        node_count=node_count,
        strut_count=len(primitives) - node_count,
        stats=stats,
    )

    if not primitives:
        report.add_warning(
            f"Lattice '{lattice_type}' produced no primitives for "
            f"size={lattice_params.size}, length={lattice_params.length}, "
            f"radius={lattice_params.radius}"
        )
        logger.warning(report.warnings[-1])

    logger.info(
        f"Generated {lattice_type} lattice: {len(primitives)} primitives "
        f"({node_count} nodes, {len(primitives) - node_count} struts/holes)"
    )

    return primitives, report


__all__ = ["generate_lattice"]
