"""
Axis-perpendicular hole and strut patterns (the "vertical" families).

Features are placed at stations spaced ``spacing_factor * size`` along the
specimen axis. Each feature is a chord of the gauge cylinder: a cylinder
whose axis lies in the cross-section plane of its station and whose end
points sit on the cylinder surface. No randomness is involved.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES in the family
configuration and radians internally.
"""

from typing import List, Tuple, Dict, Any
import math
import numpy as np
import logging

from specimen_policies import LatticePolicy, LatticeFamilyConfig
from ...core.types import LatticeParams
from ...core.primitives import StrutPrimitive, Primitive

logger = logging.getLogger(__name__)


def station_positions(lp: LatticeParams, spacing: float) -> List[Tuple[float, float]]:
    """
    Axial stations of a perpendicular pattern.

    Returns
    -------
    list of (index, x)
        ``index`` runs over -n/2 .. n/2 in unit steps with
        n = floor(length / spacing) - 1; it may be a half integer.
    """
    n = math.floor(lp.length / spacing) - 1
    half = lp.length / 2.0
    stations = []
    for index in np.arange(-n / 2.0, n / 2.0 + 0.5):
        x = float(index) * spacing
        if -half <= x <= half:
            stations.append((float(index), x))
    return stations


def chord(
    x: float,
    angle: float,
    offset: float,
    radius: float,
) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
    """
    End points of a cross-section chord.

    Parameters
    ----------
    x : float
        Axial station
    angle : float
        Chord direction in the Y/Z plane (radians from +Y)
    offset : float
        Signed distance of the chord from the axis
    radius : float
        Cylinder radius

    Returns
    -------
    tuple
        (start, end) points, both at radial distance ``radius``
    """
    d = np.array([0.0, math.cos(angle), math.sin(angle)])
    p = np.array([0.0, -math.sin(angle), math.cos(angle)])
    h = math.sqrt(max(radius * radius - offset * offset, 0.0))
    center = np.array([x, 0.0, 0.0]) + offset * p
    start = center - h * d
    end = center + h * d
    return tuple(float(c) for c in start), tuple(float(c) for c in end)


def _grid_offsets(lp: LatticeParams, spacing: float, extent_factor: float) -> List[float]:
    count = math.floor(2.0 * lp.radius / spacing)
    limit = lp.radius * extent_factor
    return [
        float(j) * spacing
        for j in np.arange(-count / 2.0, count / 2.0 + 0.5)
        if abs(float(j) * spacing) <= limit
    ]


def generate_perpendicular_lattice(
    config: LatticeFamilyConfig,
    lp: LatticeParams,
    policy: LatticePolicy,
    rng: np.random.Generator,
) -> Tuple[List[Primitive], Dict[str, Any]]:
    """
    Emit chord holes (and connector struts) for a perpendicular family.

    Hole radius is ``thickness * (hole_radius_factor + radius_modulation *
    sin(angle))``, multiplied by the density offset for families with
    ``scale_by_offset``. Chords shorter than ``policy.min_strut_length``
    are skipped. The generator is deterministic and does not draw from
    ``rng``.
    """
    spacing = config.spacing_factor * lp.size
    stations = station_positions(lp, spacing)

    scale = lp.thickness * (lp.offset if config.scale_by_offset else 1.0)
    diagonal_radius = scale * config.diagonal_radius_factor

    if config.grid_extent_factor > 0:
        offsets = _grid_offsets(lp, spacing, config.grid_extent_factor)
    else:
        offsets = [0.0]

    primitives: List[Primitive] = []
    holes = 0
    short_chords = 0

    for index, x in stations:
        drift = math.sin(index * 0.5) * config.angular_drift

        for angle_deg in config.hole_angles_deg:
            angle = math.radians(angle_deg) + drift
            hole_radius = scale * (config.hole_radius_factor + config.radius_modulation * math.sin(angle))
            for offset in offsets:
                start, end = chord(x, angle, offset, lp.radius)
                if math.dist(start, end) < policy.min_strut_length:
                    short_chords += 1
                    continue
                primitives.append(StrutPrimitive(
                    start=start,
                    end=end,
                    radius=hole_radius,
                    sections=policy.hole_sections,
                    role="hole",
                ))
                holes += 1

        for angle_deg in config.diagonal_angles_deg:
            start, end = chord(x, math.radians(angle_deg), 0.0, lp.radius)
            if math.dist(start, end) < policy.min_strut_length:
                short_chords += 1
                continue
            primitives.append(StrutPrimitive(
                start=start,
                end=end,
                radius=diagonal_radius,
                sections=policy.hole_sections,
                role="hole",
            ))
            holes += 1

    connectors = 0
    if config.connector_radius_factor > 0:
        connector_radius = lp.thickness * config.connector_radius_factor
        for (_, x0), (_, x1) in zip(stations, stations[1:]):
            if x1 - x0 < policy.min_strut_length:
                continue
            primitives.append(StrutPrimitive(
                start=(x0, 0.0, 0.0),
                end=(x1, 0.0, 0.0),
                radius=connector_radius,
                sections=policy.strut_sections,
            ))
            connectors += 1

    stats = {
        "spacing": spacing,
        "stations": len(stations),
        "chord_offsets": offsets,
        "holes": holes,
        "short_chords_skipped": short_chords,
        "connectors": connectors,
    }
    logger.debug(f"{config.name}: {len(stations)} stations, {holes} holes, {connectors} connectors")

    return primitives, stats


__all__ = [
    "station_positions",
    "chord",
    "generate_perpendicular_lattice",
]
