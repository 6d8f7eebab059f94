"""
Half-profile generation for axisymmetric dog-bone specimens.

The profile is the y >= 0 outline of the specimen in the (axial, radial)
plane. It runs from the left tip on the axis, along the left grip, through
the left transition and the gauge section, back out through the mirrored
transition and the right grip, to the right tip on the axis.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from typing import Optional, List, TYPE_CHECKING
import numpy as np
import logging

from specimen_policies import ProfilePolicy
from ..core.types import SpecimenParams, Point2D, Profile

if TYPE_CHECKING:
    import trimesh

logger = logging.getLogger(__name__)


def compute_transition_length(
    params: SpecimenParams,
    policy: Optional[ProfilePolicy] = None,
) -> float:
    """
    Compute the axial length of one grip-to-gauge transition.

    Tapered transitions are straight cones whose half-angle is the taper
    angle, clamped into the policy domain. Non-tapered transitions use the
    empirical ``max(radius_diff * 4, fillet * 1.2)`` heuristic.

    Parameters
    ----------
    params : SpecimenParams
        Specimen dimensions
    policy : ProfilePolicy, optional
        Heuristic constants and taper clamp domain

    Returns
    -------
    float
        Transition length in mm (never negative)
    """
    if policy is None:
        policy = ProfilePolicy()

    radius_diff = params.grip_radius - params.gauge_radius

    if params.use_tapered_transition:
        angle = policy.clamp_taper_angle(params.taper_angle)
        if angle != params.taper_angle:
            logger.warning(
                f"Taper angle {params.taper_angle} deg clamped to {angle} deg"
            )
        return max(radius_diff, 0.0) / float(np.tan(np.radians(angle)))

    return max(
        radius_diff * policy.radius_diff_multiplier,
        params.fillet_radius * policy.fillet_multiplier,
    )


def _transition_points(
    x_start: float,
    y_start: float,
    y_end: float,
    length: float,
    samples: int,
) -> List[Point2D]:
    """
    Interior points of a cosine-eased transition.

    x advances linearly while y follows (1 - cos(pi t)) / 2, so the curve
    has zero slope where it meets the grip and gauge radii.
    """
    t = np.arange(1, samples) / samples
    smooth_t = (1.0 - np.cos(np.pi * t)) / 2.0
    xs = x_start + t * length
    ys = y_start + (y_end - y_start) * smooth_t
    return [Point2D(float(x), float(y)) for x, y in zip(xs, ys)]


def generate_profile(
    params: SpecimenParams,
    policy: Optional[ProfilePolicy] = None,
) -> Profile:
    """
    Generate the half profile of a specimen.

    Parameters
    ----------
    params : SpecimenParams
        Specimen dimensions
    policy : ProfilePolicy, optional
        Sampling resolution and transition heuristics

    Returns
    -------
    Profile
        Ordered x-monotonic points plus the derived lengths
    """
    if policy is None:
        policy = ProfilePolicy()

    if params.grip_length <= 0 or params.gauge_length <= 0:
        raise ValueError(
            f"Grip length ({params.grip_length}) and gauge length "
            f"({params.gauge_length}) must be positive"
        )
    if params.gauge_diameter >= params.grip_diameter:
        logger.warning(
            f"Gauge diameter ({params.gauge_diameter}) is not smaller than "
            f"grip diameter ({params.grip_diameter})"
        )

    grip_r = params.grip_radius
    gauge_r = params.gauge_radius
    half_gauge = params.gauge_length / 2.0

    transition_length = compute_transition_length(params, policy)
    total_length = 2 * params.grip_length + params.gauge_length + 2 * transition_length
    half_total = total_length / 2.0

    points = [
        Point2D(-half_total, 0.0),
        Point2D(-half_total, grip_r),
        Point2D(-half_gauge - transition_length, grip_r),
    ]

    if not params.use_tapered_transition:
        points.extend(_transition_points(
            -half_gauge - transition_length, grip_r, gauge_r,
            transition_length, policy.transition_samples,
        ))

    points.append(Point2D(-half_gauge, gauge_r))
    points.append(Point2D(half_gauge, gauge_r))

    if not params.use_tapered_transition:
        points.extend(_transition_points(
            half_gauge, gauge_r, grip_r,
            transition_length, policy.transition_samples,
        ))

    points.extend([
        Point2D(half_gauge + transition_length, grip_r),
        Point2D(half_total, grip_r),
        Point2D(half_total, 0.0),
    ])

    logger.debug(
        f"Profile: {len(points)} points, transition={transition_length:.3f}mm, "
        f"total={total_length:.3f}mm"
    )

    return Profile(
        points=tuple(points),
        total_length=total_length,
        grip_length=params.grip_length,
        gauge_length=params.gauge_length,
        transition_length=transition_length,
        grip_diameter=params.grip_diameter,
        gauge_diameter=params.gauge_diameter,
        fillet_radius=params.fillet_radius,
        use_tapered_transition=params.use_tapered_transition,
        taper_angle=params.taper_angle,
    )


def revolve_profile(
    profile: Profile,
    sections: int = 64,
) -> "trimesh.Trimesh":
    """
    Revolve a half profile about the specimen axis into the outer solid.

    Parameters
    ----------
    profile : Profile
        Half profile; its first and last points lie on the axis
    sections : int
        Number of angular segments

    Returns
    -------
    trimesh.Trimesh
        Revolved solid with the specimen axis along +X
    """
    import trimesh

    pts = profile.as_array()
    # drop repeated consecutive points so no zero-area bands are produced
    keep = np.ones(len(pts), dtype=bool)
    keep[1:] = np.any(np.abs(np.diff(pts, axis=0)) > 1e-12, axis=1)
    pts = pts[keep]

    # trimesh revolves (radius, height) around +Z
    linestring = np.column_stack([pts[:, 1], pts[:, 0]])
    solid = trimesh.creation.revolve(linestring, sections=sections)
    solid.apply_transform(trimesh.transformations.rotation_matrix(np.pi / 2, [0, 1, 0]))

    solid.merge_vertices()
    solid.remove_unreferenced_vertices()
    if solid.volume < 0:
        solid.invert()

    return solid


__all__ = [
    "compute_transition_length",
    "generate_profile",
    "revolve_profile",
]
