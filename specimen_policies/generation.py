"""
Generation policies for specimen geometry.

This module contains the policy dataclasses used by the profile, lattice,
combination and volume-estimation operations. All policies are
JSON-serializable and support the "requested vs effective" pattern.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Literal


@dataclass
class ProfilePolicy:
    """
    Policy for half-profile generation.

    The transition-length heuristic for non-tapered transitions is
    ``max(radius_difference * radius_diff_multiplier,
    fillet_radius * fillet_multiplier)``. It is an empirical policy constant
    kept for compatibility with existing designs, not a standard formula.

    JSON Schema:
    {
        "transition_samples": int,
        "taper_angle_min": float (degrees),
        "taper_angle_max": float (degrees),
        "radius_diff_multiplier": float,
        "fillet_multiplier": float,
        "revolve_sections": int
    }
    """
    transition_samples: int = 20
    taper_angle_min: float = 7.0
    taper_angle_max: float = 10.0
    radius_diff_multiplier: float = 4.0
    fillet_multiplier: float = 1.2
    revolve_sections: int = 64

    def clamp_taper_angle(self, angle_deg: float) -> float:
        """Clamp a taper angle into the configured domain."""
        return min(max(angle_deg, self.taper_angle_min), self.taper_angle_max)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ProfilePolicy":
        return ProfilePolicy(**{k: v for k, v in d.items() if k in ProfilePolicy.__dataclass_fields__})


@dataclass
class LatticePolicy:
    """
    Policy for lattice primitive generation.

    Randomized bond inclusion always draws from a generator seeded with
    ``seed``, so identical parameters give an identical lattice.

    ``family_overrides`` replaces scalar fields of a family's
    ``LatticeFamilyConfig`` (e.g. ``{"vertical": {"spacing_factor": 3.0}}``)
    for lattice generation only.

    JSON Schema:
    {
        "seed": int,
        "min_strut_length": float (mm),
        "sphere_subdivisions": int,
        "strut_sections": int,
        "hole_sections": int,
        "node_merge_tolerance": float (mm),
        "family_overrides": {family: {config_field: value}}
    }
    """
    seed: int = 0
    min_strut_length: float = 0.3
    sphere_subdivisions: int = 1
    strut_sections: int = 8
    hole_sections: int = 16
    node_merge_tolerance: float = 1e-6
    family_overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "LatticePolicy":
        return LatticePolicy(**{k: v for k, v in d.items() if k in LatticePolicy.__dataclass_fields__})


@dataclass
class CombinePolicy:
    """
    Policy for Boolean combination of lattice primitives with the gauge cylinder.

    When more than ``max_union_operands`` primitives are produced for a
    union-then-subtract family, only every Nth primitive is unioned with
    ``N = ceil(count / max_union_operands)``.

    JSON Schema:
    {
        "engine": "manifold" | "blender" | null,
        "max_union_operands": int,
        "cylinder_sections": int,
        "require_watertight": bool,
        "cleanup_result": bool
    }
    """
    engine: str = "manifold"
    max_union_operands: int = 50
    cylinder_sections: int = 32
    require_watertight: bool = True
    cleanup_result: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "CombinePolicy":
        return CombinePolicy(**{k: v for k, v in d.items() if k in CombinePolicy.__dataclass_fields__})


@dataclass
class VolumePolicy:
    """
    Policy for analytic void-fraction estimation.

    JSON Schema:
    {
        "max_void_fraction": float (0-1, exclusive upper bound of reports)
    }
    """
    max_void_fraction: float = 0.95

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "VolumePolicy":
        return VolumePolicy(**{k: v for k, v in d.items() if k in VolumePolicy.__dataclass_fields__})


@dataclass
class OutputPolicy:
    """
    Policy for output file generation.

    JSON Schema:
    {
        "output_dir": str,
        "naming_convention": "fixed" | "timestamped",
        "mesh_format": "stl" | "ply" | "obj",
        "save_outer_solid": bool,
        "save_reports": bool
    }
    """
    output_dir: str = "./output"
    naming_convention: Literal["fixed", "timestamped"] = "fixed"
    mesh_format: Literal["stl", "ply", "obj"] = "stl"
    save_outer_solid: bool = True
    save_reports: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "OutputPolicy":
        return OutputPolicy(**{k: v for k, v in d.items() if k in OutputPolicy.__dataclass_fields__})


__all__ = [
    "ProfilePolicy",
    "LatticePolicy",
    "CombinePolicy",
    "VolumePolicy",
    "OutputPolicy",
]
