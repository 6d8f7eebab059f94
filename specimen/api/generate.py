"""
Specimen generation API.

``generate_gauge_section`` builds the void-bearing gauge solid and never
raises: any failure escaping the lattice or combination stage is replaced
by a plain gauge cylinder flagged as wireframe/degraded. ``generate_specimen``
runs the whole pipeline (profile, gauge section, outer solid, estimates and
advisory validation) for one parameter set.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, TYPE_CHECKING
import logging

from specimen_policies import (
    ProfilePolicy,
    LatticePolicy,
    CombinePolicy,
    VolumePolicy,
    OperationReport,
    get_family_config,
)
from specimen_validity import validate_specimen, check_solid, ValidationResult
from ..core.types import SpecimenParams, Profile, LatticeParams
from ..ops.profile import generate_profile, revolve_profile
from ..ops.lattice import generate_lattice
from ..ops.primitives.meshes import create_gauge_cylinder
from ..ops.mesh.combiner import combine, make_fallback_solid
from ..analysis.volume import estimate_specimen_volume
from ..analysis.topology import lattice_topology

if TYPE_CHECKING:
    import trimesh

logger = logging.getLogger(__name__)


def generate_gauge_section(
    params: SpecimenParams,
    lattice_policy: Optional[LatticePolicy] = None,
    combine_policy: Optional[CombinePolicy] = None,
) -> Tuple["trimesh.Trimesh", OperationReport]:
    """
    Build the gauge section solid with its lattice voids.

    Parameters
    ----------
    params : SpecimenParams
        Specimen parameters; gauge diameter/length bound the lattice
    lattice_policy : LatticePolicy, optional
        Seed and tessellation of the lattice primitives
    combine_policy : CombinePolicy, optional
        Boolean engine and union cap

    Returns
    -------
    solid : trimesh.Trimesh
        Gauge solid along +X, centered on the origin
    report : OperationReport
        Lattice, topology and combination details; ``success`` is False
        when the degraded fallback solid was returned
    """
    if lattice_policy is None:
        lattice_policy = LatticePolicy()
    if combine_policy is None:
        combine_policy = CombinePolicy()

    report = OperationReport(
        operation="generate_gauge_section",
        requested_policy={
            "lattice": lattice_policy.to_dict(),
            "combine": combine_policy.to_dict(),
        },
        effective_policy={
            "lattice": lattice_policy.to_dict(),
            "combine": combine_policy.to_dict(),
        },
        metadata={"lattice_type": params.lattice_type},
    )

    cylinder = None
    try:
        cylinder = create_gauge_cylinder(
            params.gauge_radius, params.gauge_length, sections=combine_policy.cylinder_sections
        )
        config = get_family_config(params.lattice_type)

        if config.strategy == "none":
            report.metadata["degraded"] = False
            return cylinder, report

        lattice_params = LatticeParams.from_specimen(params)
        primitives, lattice_report = generate_lattice(
            params.lattice_type, lattice_params, lattice_policy
        )
        report.warnings.extend(lattice_report.warnings)
        report.metadata["lattice"] = lattice_report.metadata
        report.metadata["topology"] = lattice_topology(primitives)

        solid, combine_report = combine(
            cylinder, primitives, config.combine_mode, combine_policy
        )
        report.warnings.extend(combine_report.warnings)
        report.metadata["combine"] = {
            "mode": combine_report.mode,
            "primitive_count": combine_report.primitive_count,
            "stride": combine_report.stride,
            "operations_attempted": combine_report.operations_attempted,
            "operations_succeeded": combine_report.operations_succeeded,
            "skipped": combine_report.skipped,
            "used_fallback": combine_report.used_fallback,
        }
        for error in combine_report.errors:
            report.add_error(error)
        report.metadata["degraded"] = combine_report.used_fallback

    except Exception as e:
        logger.exception(f"Gauge section generation failed: {e}")
        report.add_error(f"Gauge section generation failed: {type(e).__name__}: {e}")
        report.metadata["degraded"] = True
        solid = make_fallback_solid(
            cylinder,
            radius=params.gauge_radius,
            length=params.gauge_length,
            sections=combine_policy.cylinder_sections,
        )

    return solid, report


@dataclass
class SpecimenResult:
    """Everything produced for one parameter set."""
    params: SpecimenParams
    profile: Profile
    gauge_solid: "trimesh.Trimesh"
    outer_solid: Optional["trimesh.Trimesh"]
    void_fraction: float
    volume: Dict[str, Any]
    validation: ValidationResult
    reports: Dict[str, Any] = field(default_factory=dict)

    @property
    def degraded(self) -> bool:
        return bool(self.gauge_solid.metadata.get("degraded", False))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary; meshes are reduced to counts."""
        return {
            "params": self.params.to_dict(),
            "profile": self.profile.to_dict(),
            "gauge_solid": {
                "vertex_count": len(self.gauge_solid.vertices),
                "face_count": len(self.gauge_solid.faces),
                "degraded": self.degraded,
            },
            "outer_solid": None if self.outer_solid is None else {
                "vertex_count": len(self.outer_solid.vertices),
                "face_count": len(self.outer_solid.faces),
            },
            "void_fraction": self.void_fraction,
            "volume": self.volume,
            "validation": self.validation.to_dict(),
            "reports": self.reports,
        }


def generate_specimen(
    params: SpecimenParams,
    standard: str = "E466",
    profile_policy: Optional[ProfilePolicy] = None,
    lattice_policy: Optional[LatticePolicy] = None,
    combine_policy: Optional[CombinePolicy] = None,
    volume_policy: Optional[VolumePolicy] = None,
    build_outer_solid: bool = True,
) -> SpecimenResult:
    """
    Run the full generation pipeline for one specimen.

    Validation is advisory: a failing design is still generated and the
    validation result is attached to the output.

    Parameters
    ----------
    params : SpecimenParams
        Specimen parameters
    standard : str
        Standard used for validation
    profile_policy, lattice_policy, combine_policy, volume_policy : optional
        Stage policies (defaults when omitted)
    build_outer_solid : bool
        Revolve the profile into the outer solid

    Returns
    -------
    SpecimenResult
    """
    if profile_policy is None:
        profile_policy = ProfilePolicy()

    validation = validate_specimen(params, standard)
    if not validation.valid:
        logger.warning(f"Design does not meet {standard}: {validation.message}")

    profile = generate_profile(params, profile_policy)

    outer_solid = None
    if build_outer_solid:
        outer_solid = revolve_profile(profile, sections=profile_policy.revolve_sections)

    gauge_solid, gauge_report = generate_gauge_section(params, lattice_policy, combine_policy)
    volume = estimate_specimen_volume(params, profile, volume_policy)

    logger.info(
        f"Specimen generated: total length {profile.total_length:.2f}mm, "
        f"lattice {params.lattice_type}, void fraction {volume['void_fraction']:.3f}"
    )

    return SpecimenResult(
        params=params,
        profile=profile,
        gauge_solid=gauge_solid,
        outer_solid=outer_solid,
        void_fraction=volume["void_fraction"],
        volume=volume,
        validation=validation,
        reports={
            "gauge_section": gauge_report.to_dict(),
            "gauge_solid_checks": check_solid(gauge_solid).to_dict(),
        },
    )


__all__ = [
    "generate_gauge_section",
    "generate_specimen",
    "SpecimenResult",
]
