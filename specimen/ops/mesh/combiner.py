"""
Boolean combination of lattice primitives with the gauge cylinder.

Two modes are supported:

- ``union_subtract``: union the primitives one after another into a single
  lattice solid, then subtract it from the cylinder once. Above
  ``max_union_operands`` primitives only every Nth one is used.
- ``iterative_subtract``: subtract each primitive from the running solid.

A failed operation drops only the primitive involved and the loop carries on
with the last good solid. If the stage fails as a whole, a copy of the plain
cylinder flagged as wireframe/degraded is returned instead.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, List, Sequence, TYPE_CHECKING
import math
import logging

from specimen_policies import CombinePolicy, OperationReport
from ...core.primitives import Primitive
from ..primitives.meshes import create_gauge_cylinder
from .boolean import BooleanResult, boolean_union, boolean_difference
from .repair import cleanup_mesh

if TYPE_CHECKING:
    import trimesh

logger = logging.getLogger(__name__)


@dataclass
class CombineReport(OperationReport):
    """
    OperationReport with Boolean bookkeeping.

    ``skipped`` holds one entry per dropped primitive:
    ``{"index": int, "stage": "mesh" | "union" | "difference", "reason": str}``.
    """
    operation: str = "combine"
    mode: str = "none"
    primitive_count: int = 0
    stride: int = 1
    operations_attempted: int = 0
    operations_succeeded: int = 0
    skipped: List[Dict[str, Any]] = field(default_factory=list)
    used_fallback: bool = False

    def record(self, result: BooleanResult, index: int) -> bool:
        """Count one Boolean operation; log and record a skip on failure."""
        self.operations_attempted += 1
        if result.success:
            self.operations_succeeded += 1
            return True
        self.record_skip(index, result.operation, result.reason)
        return False

    def record_skip(self, index: int, stage: str, reason: str) -> None:
        self.skipped.append({"index": index, "stage": stage, "reason": reason})
        message = f"Skipped primitive {index} ({stage} failed: {reason})"
        self.add_warning(message)
        logger.warning(message)


def union_stride(count: int, max_operands: int) -> int:
    """Stride so that at most ``max_operands`` of ``count`` primitives are unioned."""
    if max_operands <= 0 or count <= max_operands:
        return 1
    return math.ceil(count / max_operands)


def make_fallback_solid(
    cylinder: Optional["trimesh.Trimesh"] = None,
    radius: Optional[float] = None,
    length: Optional[float] = None,
    sections: int = 32,
) -> "trimesh.Trimesh":
    """
    Plain gauge cylinder flagged as degraded output.

    Copies ``cylinder`` when given, otherwise builds a new one from
    ``radius`` and ``length``.
    """
    if cylinder is not None:
        fallback = cylinder.copy()
    else:
        fallback = create_gauge_cylinder(radius, length, sections=sections)
    fallback.metadata["wireframe"] = True
    fallback.metadata["degraded"] = True
    return fallback


def _realize(primitive: Primitive, index: int, report: CombineReport):
    try:
        return primitive.to_mesh()
    except ValueError as e:
        report.record_skip(index, "mesh", str(e))
        return None


def _union_then_subtract(
    cylinder: "trimesh.Trimesh",
    primitives: Sequence[Primitive],
    policy: CombinePolicy,
    report: CombineReport,
) -> "trimesh.Trimesh":
    report.stride = union_stride(len(primitives), policy.max_union_operands)
    selected = list(range(0, len(primitives), report.stride))
    report.metadata["unioned_indices"] = len(selected)
    if report.stride > 1:
        logger.info(
            f"Union capped: using every {report.stride}th of {len(primitives)} primitives"
        )

    lattice = None
    for index in selected:
        mesh = _realize(primitives[index], index, report)
        if mesh is None:
            continue
        if lattice is None:
            lattice = mesh
            continue
        result = boolean_union(
            lattice, mesh,
            engine=policy.engine,
            require_watertight=policy.require_watertight,
        )
        if report.record(result, index):
            lattice = result.mesh

    if lattice is None:
        report.add_warning("No lattice primitive could be meshed; cylinder left solid")
        return cylinder.copy()

    result = boolean_difference(
        cylinder, lattice,
        engine=policy.engine,
        require_watertight=policy.require_watertight,
    )
    if report.record(result, -1):
        return result.mesh
    return cylinder.copy()


def _iterative_subtract(
    cylinder: "trimesh.Trimesh",
    primitives: Sequence[Primitive],
    policy: CombinePolicy,
    report: CombineReport,
) -> "trimesh.Trimesh":
    running = cylinder.copy()
    for index, primitive in enumerate(primitives):
        mesh = _realize(primitive, index, report)
        if mesh is None:
            continue
        result = boolean_difference(
            running, mesh,
            engine=policy.engine,
            require_watertight=policy.require_watertight,
        )
        if report.record(result, index):
            running = result.mesh
        logger.debug(f"Subtracted primitive {index + 1}/{len(primitives)}")
    return running


def combine(
    cylinder: "trimesh.Trimesh",
    primitives: Sequence[Primitive],
    mode: str,
    policy: Optional[CombinePolicy] = None,
) -> Tuple["trimesh.Trimesh", CombineReport]:
    """
    Carve lattice primitives out of the gauge cylinder.

    Parameters
    ----------
    cylinder : trimesh.Trimesh
        Solid gauge cylinder (not modified)
    primitives : sequence of NodePrimitive / StrutPrimitive
        Output of ``generate_lattice``
    mode : str
        "none", "union_subtract" or "iterative_subtract"
    policy : CombinePolicy, optional
        Boolean engine, union cap and cleanup options

    Returns
    -------
    solid : trimesh.Trimesh
        New mesh; never the cylinder object itself
    report : CombineReport
        Operation counts, skipped primitives and fallback flag
    """
    if policy is None:
        policy = CombinePolicy()

    report = CombineReport(
        mode=mode,
        primitive_count=len(primitives),
        requested_policy=policy.to_dict(),
        effective_policy=policy.to_dict(),
    )

    if mode == "none" or not primitives:
        return cylinder.copy(), report

    try:
        if mode == "union_subtract":
            solid = _union_then_subtract(cylinder, primitives, policy, report)
        elif mode == "iterative_subtract":
            solid = _iterative_subtract(cylinder, primitives, policy, report)
        else:
            raise ValueError(f"Unknown combine mode '{mode}'")

        if policy.cleanup_result:
            solid, cleanup_stats = cleanup_mesh(solid)
            report.metadata["cleanup"] = cleanup_stats

    except Exception as e:
        logger.exception(f"Combination failed, returning plain cylinder: {e}")
        report.add_error(f"Combination failed: {e}")
        report.used_fallback = True
        return make_fallback_solid(cylinder), report

    report.metadata.update(
        face_count=len(solid.faces),
        is_watertight=bool(solid.is_watertight),
    )
    logger.info(
        f"Combined {len(primitives)} primitives ({mode}): "
        f"{report.operations_succeeded}/{report.operations_attempted} operations succeeded, "
        f"{len(report.skipped)} skipped"
    )

    return solid, report


__all__ = [
    "CombineReport",
    "combine",
    "union_stride",
    "make_fallback_solid",
]
