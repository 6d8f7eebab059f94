"""
Analytic volume and void-fraction estimates.

These estimates avoid Boolean evaluation entirely; they are used for
weight-saving reports while a specimen is being designed.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS; volumes are in mm^3.
"""

from typing import Optional, Dict, Any
import math
import numpy as np
import logging

from specimen_policies import VolumePolicy, get_family_config
from ..core.types import SpecimenParams, Profile, LatticeParams

logger = logging.getLogger(__name__)


def estimate_void_fraction(
    lattice_type: str,
    lattice_params: LatticeParams,
    policy: Optional[VolumePolicy] = None,
) -> float:
    """
    Estimate the fraction of the gauge volume removed by a lattice.

    Hole/strut families count their axial features: each removes a
    cylinder of radius ``thickness`` across the diameter, scaled by the
    family correction factor. Other families use a calibrated
    ``base + offset * scale`` term.

    Parameters
    ----------
    lattice_type : str
        Lattice family name
    lattice_params : LatticeParams
        Bounding cylinder and density inputs
    policy : VolumePolicy, optional
        Upper clamp of the reported fraction

    Returns
    -------
    float
        Fraction in [0, 1)
    """
    if policy is None:
        policy = VolumePolicy()

    config = get_family_config(lattice_type)
    lp = lattice_params

    if config.void_estimate == "none":
        return 0.0

    if config.void_estimate == "feature_count":
        spacing = config.spacing_factor * lp.size
        count = max(math.floor(lp.length / spacing) - 1, 0)
        feature_volume = np.pi * lp.thickness ** 2 * 2.0 * lp.radius
        fraction = count * feature_volume / lp.gauge_volume * config.void_correction
    else:
        fraction = config.void_base + lp.offset * config.void_offset_scale

    return float(min(max(fraction, 0.0), policy.max_void_fraction))


def estimate_specimen_volume(
    params: SpecimenParams,
    profile: Profile,
    policy: Optional[VolumePolicy] = None,
) -> Dict[str, Any]:
    """
    Volume breakdown of a specimen and the weight saving of its lattice.

    Transitions are approximated as cylinders of the mean grip/gauge
    diameter.

    Parameters
    ----------
    params : SpecimenParams
        Specimen parameters (lattice inputs included)
    profile : Profile
        Generated profile (provides the transition length)
    policy : VolumePolicy, optional
        Passed to ``estimate_void_fraction``

    Returns
    -------
    dict
        Volumes in mm^3 plus ``void_fraction``, ``weight_saving_percent``
        and ``gauge_porosity_percent``
    """
    grip_volume = np.pi * params.grip_radius ** 2 * params.grip_length * 2
    gauge_volume = np.pi * params.gauge_radius ** 2 * params.gauge_length
    mean_diameter = (params.grip_diameter + params.gauge_diameter) / 2.0
    transition_volume = np.pi * (mean_diameter / 2.0) ** 2 * profile.transition_length * 2
    solid_volume = grip_volume + gauge_volume + transition_volume

    if params.lattice_type == "none":
        void_fraction = 0.0
    else:
        void_fraction = estimate_void_fraction(
            params.lattice_type, LatticeParams.from_specimen(params), policy
        )

    removed = gauge_volume * void_fraction
    actual_volume = solid_volume - removed
    weight_saving = removed / solid_volume * 100.0 if solid_volume > 0 else 0.0

    return {
        "grip_volume": float(grip_volume),
        "gauge_volume": float(gauge_volume),
        "transition_volume": float(transition_volume),
        "solid_volume": float(solid_volume),
        "void_fraction": void_fraction,
        "removed_volume": float(removed),
        "actual_volume": float(actual_volume),
        "weight_saving_percent": float(weight_saving),
        "gauge_porosity_percent": void_fraction * 100.0,
    }


__all__ = [
    "estimate_void_fraction",
    "estimate_specimen_volume",
]
