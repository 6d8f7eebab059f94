"""
Core value types for specimen geometry.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
The specimen axis is X; radial coordinates are Y (profile) or Y/Z (solids).
"""

from dataclasses import dataclass, asdict, fields, replace
from typing import Tuple, Dict, Any, Literal
import numpy as np

from specimen_policies import alias_fields

TransitionType = Literal["tangent-arc", "spline", "conical"]

LatticeType = Literal[
    "none",
    "bcc",
    "fcc",
    "diamond",
    "octet",
    "gyroid",
    "vertical",
    "simple-vertical",
    "vertical-grid",
    "vertical-cross",
    "vertical-diamond",
    "vertical-gyroid",
]

# camelCase keys as produced by form/JSON parameter collectors
_PARAM_ALIASES = {
    "gripLength": "grip_length",
    "gripDiameter": "grip_diameter",
    "gaugeLength": "gauge_length",
    "gaugeDiameter": "gauge_diameter",
    "filletRadius": "fillet_radius",
    "transitionType": "transition_type",
    "useTaperedTransition": "use_tapered_transition",
    "taperAngle": "taper_angle",
    "latticeType": "lattice_type",
    "latticeSize": "lattice_size",
    "latticeThickness": "lattice_thickness",
    "latticeOffset": "lattice_offset",
}


@dataclass(frozen=True)
class SpecimenParams:
    """
    Dimensional and lattice parameters of an axisymmetric dog-bone specimen.

    Instances are immutable and passed by value through the pipeline.
    Parameter validity is reported by ``specimen_validity.validate_specimen``
    rather than enforced here, so out-of-range designs can still be previewed.
    """
    grip_length: float = 50.0
    grip_diameter: float = 15.0
    gauge_length: float = 30.0
    gauge_diameter: float = 8.0
    fillet_radius: float = 60.0
    transition_type: TransitionType = "spline"
    use_tapered_transition: bool = False
    taper_angle: float = 8.0
    lattice_type: LatticeType = "none"
    lattice_size: float = 2.0
    lattice_thickness: float = 0.5
    lattice_offset: float = 0.5

    @property
    def grip_radius(self) -> float:
        return self.grip_diameter / 2.0

    @property
    def gauge_radius(self) -> float:
        return self.gauge_diameter / 2.0

    def with_changes(self, **changes: Any) -> "SpecimenParams":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def updated_from(self, d: Dict[str, Any]) -> "SpecimenParams":
        """Return a copy with the fields present in ``d`` applied (camelCase keys accepted)."""
        d = alias_fields(d, _PARAM_ALIASES)
        names = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in d.items() if k in names})

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SpecimenParams":
        return cls().updated_from(d)


@dataclass(frozen=True)
class Point2D:
    """Point of the half profile: axial position x, radial position y >= 0."""
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: Dict[str, float]) -> "Point2D":
        return cls(x=float(d["x"]), y=float(d["y"]))


@dataclass(frozen=True)
class Profile:
    """
    Half (y >= 0) outline of the revolved specimen.

    Points are ordered with non-decreasing x, from the left tip on the axis
    to the right tip on the axis.
    """
    points: Tuple[Point2D, ...]
    total_length: float
    grip_length: float
    gauge_length: float
    transition_length: float
    grip_diameter: float
    gauge_diameter: float
    fillet_radius: float = 0.0
    use_tapered_transition: bool = False
    taper_angle: float = 0.0

    def as_array(self) -> np.ndarray:
        """Return the points as an (n, 2) array of (x, y)."""
        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    def full_silhouette(self) -> np.ndarray:
        """
        Return the closed 2D silhouette (upper half followed by the mirrored
        lower half, traversed back from right to left).
        """
        upper = self.as_array()
        lower = upper[::-1].copy()
        lower[:, 1] *= -1.0
        return np.vstack([upper, lower[1:]])

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["points"] = [p.to_dict() for p in self.points]
        return d


@dataclass(frozen=True)
class LatticeParams:
    """
    Bounding volume and pattern density inputs shared by every lattice family.

    Parameters
    ----------
    size : float
        Unit cell size (mm)
    thickness : float
        Strut / void thickness (mm)
    offset : float
        Density offset (dimensionless)
    radius : float
        Gauge cylinder radius (mm)
    length : float
        Gauge cylinder length along X (mm)
    """
    size: float
    thickness: float
    offset: float
    radius: float
    length: float

    def __post_init__(self):
        for name in ("size", "thickness", "offset", "radius", "length"):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                raise ValueError(f"{name} ({value}) must be positive")

    @classmethod
    def from_specimen(cls, params: SpecimenParams) -> "LatticeParams":
        return cls(
            size=params.lattice_size,
            thickness=params.lattice_thickness,
            offset=params.lattice_offset,
            radius=params.gauge_radius,
            length=params.gauge_length,
        )

    @property
    def gauge_volume(self) -> float:
        return float(np.pi * self.radius * self.radius * self.length)

    def contains(self, point: Tuple[float, float, float], tol: float = 1e-9) -> bool:
        """Check whether a point lies inside the bounding cylinder."""
        x, y, z = point
        half = self.length / 2.0
        if x < -half - tol or x > half + tol:
            return False
        return float(np.hypot(y, z)) <= self.radius + tol

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "TransitionType",
    "LatticeType",
    "SpecimenParams",
    "Point2D",
    "Profile",
    "LatticeParams",
]
