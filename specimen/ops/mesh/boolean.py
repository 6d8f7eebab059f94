"""
Single Boolean operations with an explicit success/failure result.

Every wrapper here catches backend errors and converts them, together with
empty or non-watertight outputs, into a failed ``BooleanResult``. Callers
decide what to do with a failure; nothing in this module raises for a bad
operand.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    import trimesh

logger = logging.getLogger(__name__)


@dataclass
class BooleanResult:
    """
    Outcome of one Boolean operation.

    ``mesh`` is a new mesh owned by the caller when ``success`` is True and
    None otherwise; ``reason`` describes the failure.
    """
    success: bool
    mesh: Optional["trimesh.Trimesh"] = None
    reason: str = ""
    operation: str = ""

    @classmethod
    def failed(cls, operation: str, reason: str) -> "BooleanResult":
        return cls(success=False, mesh=None, reason=reason, operation=operation)


def _run_boolean(
    operation: str,
    a: "trimesh.Trimesh",
    b: "trimesh.Trimesh",
    engine: Optional[str],
    require_watertight: bool,
) -> BooleanResult:
    import trimesh

    ops = {
        "union": trimesh.boolean.union,
        "difference": trimesh.boolean.difference,
    }

    if a is None or b is None or len(a.faces) == 0 or len(b.faces) == 0:
        return BooleanResult.failed(operation, "empty operand")

    try:
        # backends receive copies so operands are never touched
        result = ops[operation]([a.copy(), b.copy()], engine=engine, check_volume=False)
    except Exception as e:
        logger.debug(f"Boolean {operation} raised: {e}")
        return BooleanResult.failed(operation, f"{type(e).__name__}: {e}")

    if result is None or len(result.faces) == 0:
        return BooleanResult.failed(operation, "empty result")

    if require_watertight and not result.is_watertight:
        return BooleanResult.failed(operation, "result is not watertight")

    return BooleanResult(success=True, mesh=result, operation=operation)


def boolean_union(
    a: "trimesh.Trimesh",
    b: "trimesh.Trimesh",
    engine: Optional[str] = "manifold",
    require_watertight: bool = True,
) -> BooleanResult:
    """
    Union of two solids.

    Parameters
    ----------
    a, b : trimesh.Trimesh
        Operands (not modified)
    engine : str, optional
        trimesh Boolean backend
    require_watertight : bool
        Treat a non-watertight output as a failure

    Returns
    -------
    BooleanResult
    """
    return _run_boolean("union", a, b, engine, require_watertight)


def boolean_difference(
    a: "trimesh.Trimesh",
    b: "trimesh.Trimesh",
    engine: Optional[str] = "manifold",
    require_watertight: bool = True,
) -> BooleanResult:
    """
    Subtract ``b`` from ``a``.

    Parameters
    ----------
    a : trimesh.Trimesh
        Solid to carve (not modified)
    b : trimesh.Trimesh
        Tool solid (not modified)
    engine : str, optional
        trimesh Boolean backend
    require_watertight : bool
        Treat a non-watertight output as a failure

    Returns
    -------
    BooleanResult
    """
    return _run_boolean("difference", a, b, engine, require_watertight)


__all__ = [
    "BooleanResult",
    "boolean_union",
    "boolean_difference",
]
