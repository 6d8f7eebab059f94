"""
Public API for specimen validation.

``validate_specimen`` is advisory: it reports the first rule a design
breaks but never blocks geometry generation. ``check_solid`` runs the mesh
checks on a produced solid.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List, TYPE_CHECKING
import logging

from specimen_policies import ValidationPolicy, SolidCheckPolicy
from ..checks.standards import (
    check_diameter_order,
    check_fillet_radius,
    check_gauge_ratio,
    check_taper_angle,
)
from ..checks.solid import check_watertight, check_components, check_volume

if TYPE_CHECKING:
    import trimesh
    from specimen.core.types import SpecimenParams

logger = logging.getLogger(__name__)

VALID_MESSAGE = "Specimen design meets ASTM standards."


@dataclass
class ValidationResult:
    """Outcome of a parameter validation; ``rule`` names the failing check."""
    valid: bool
    message: str
    rule: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SolidCheckReport:
    """Results of the mesh checks run on one solid."""
    passed: bool
    checks: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    requested_policy: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_specimen(
    params: "SpecimenParams",
    standard: str = "E466",
    policy: Optional[ValidationPolicy] = None,
) -> ValidationResult:
    """
    Validate specimen parameters against a test standard.

    Rules run in order and the first failure is returned:

    1. gauge diameter < grip diameter
    2. fillet radius minimum (non-tapered only)
    3. gauge length / diameter ratio of the standard
    4. taper angle domain (tapered only)

    Parameters
    ----------
    params : SpecimenParams
        Parameters to check (not modified)
    standard : str
        "E466", "E606", "E8"; unknown standards have no ratio rule
    policy : ValidationPolicy, optional
        Thresholds and per-standard rules

    Returns
    -------
    ValidationResult
    """
    if policy is None:
        policy = ValidationPolicy()

    rules = (
        ("diameter_order", lambda: check_diameter_order(params)),
        ("fillet_radius", lambda: check_fillet_radius(params, policy)),
        ("gauge_ratio", lambda: check_gauge_ratio(params, standard, policy)),
        ("taper_angle", lambda: check_taper_angle(params, policy)),
    )

    for name, run in rules:
        result = run()
        if not result["passed"]:
            logger.debug(f"Validation failed on {name}: {result['message']}")
            return ValidationResult(valid=False, message=result["message"], rule=name)

    return ValidationResult(valid=True, message=VALID_MESSAGE)


def check_solid(
    mesh: "trimesh.Trimesh",
    policy: Optional[SolidCheckPolicy] = None,
) -> SolidCheckReport:
    """
    Run watertight, component and volume checks on a solid.

    Parameters
    ----------
    mesh : trimesh.Trimesh
        Solid to inspect (not modified)
    policy : SolidCheckPolicy, optional
        Which checks run and the component limit

    Returns
    -------
    SolidCheckReport
    """
    if policy is None:
        policy = SolidCheckPolicy()

    checks: Dict[str, Dict[str, Any]] = {"volume": check_volume(mesh)}
    if policy.check_watertight:
        checks["watertight"] = check_watertight(mesh)
    if policy.check_components:
        checks["components"] = check_components(mesh, max_components=policy.max_components)

    errors = [c["message"] for c in checks.values() if not c["passed"]]
    for message in errors:
        logger.warning(f"Solid check failed: {message}")

    return SolidCheckReport(
        passed=not errors,
        checks=checks,
        errors=errors,
        requested_policy=policy.to_dict(),
    )


__all__ = [
    "ValidationResult",
    "SolidCheckReport",
    "validate_specimen",
    "check_solid",
    "VALID_MESSAGE",
]
