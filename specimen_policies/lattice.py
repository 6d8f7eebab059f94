"""
Lattice family configuration table.

Every per-family constant (unit-cell node layout, bond table, inclusion
probabilities, radius factors, axial spacing, implicit sampling resolution,
void-fraction calibration) lives in one ``LatticeFamilyConfig`` entry so each
family can be tuned and tested on its own.

Fractional node positions are expressed in unit-cell coordinates with x
along the specimen axis. Radius factors multiply the lattice thickness.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from dataclasses import dataclass, asdict, replace
from itertools import combinations
from typing import Dict, Any, List, Literal, Optional, Tuple
import math

Vec3 = Tuple[float, float, float]

LatticeStrategy = Literal["none", "periodic", "implicit", "perpendicular"]
CombineMode = Literal["none", "union_subtract", "iterative_subtract"]
VoidEstimate = Literal["none", "base_offset", "feature_count"]


@dataclass(frozen=True)
class BondSpec:
    """
    One strut in a unit cell.

    Connects node ``a`` of the current cell to node ``b`` of the cell at
    ``cell_offset``. Bonds lying in a plane perpendicular to the specimen
    axis are always emitted; any other bond is emitted with ``probability``.
    """
    a: int
    b: int
    probability: float = 1.0
    radius_factor: float = 0.3
    cell_offset: Tuple[int, int, int] = (0, 0, 0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LatticeFamilyConfig:
    """
    Named configuration for one lattice family.

    JSON Schema:
    {
        "name": str,
        "strategy": "none" | "periodic" | "implicit" | "perpendicular",
        "combine_mode": "none" | "union_subtract" | "iterative_subtract",
        "node_positions": [[float, float, float], ...],
        "bonds": [BondSpec, ...],
        "node_radius_factor": float,
        "spacing_factor": float,
        "hole_angles_deg": [float, ...],
        "hole_radius_factor": float,
        "diagonal_angles_deg": [float, ...],
        "diagonal_radius_factor": float,
        "scale_by_offset": bool,
        "connector_radius_factor": float,
        "grid_extent_factor": float,
        "angular_drift": float,
        "radius_modulation": float,
        "implicit_resolution": int,
        "implicit_threshold_factor": float,
        "implicit_node_factor": float,
        "implicit_strut_factor": float,
        "void_estimate": "none" | "base_offset" | "feature_count",
        "void_base": float,
        "void_offset_scale": float,
        "void_correction": float
    }
    """
    name: str
    strategy: LatticeStrategy
    combine_mode: CombineMode
    # periodic unit cells
    node_positions: Tuple[Vec3, ...] = ()
    bonds: Tuple[BondSpec, ...] = ()
    node_radius_factor: float = 1.0
    # axis-perpendicular hole/strut stations
    spacing_factor: float = 2.0
    hole_angles_deg: Tuple[float, ...] = ()
    hole_radius_factor: float = 1.0
    diagonal_angles_deg: Tuple[float, ...] = ()
    diagonal_radius_factor: float = 0.8
    scale_by_offset: bool = False
    connector_radius_factor: float = 0.0
    grid_extent_factor: float = 0.0
    angular_drift: float = 0.0
    radius_modulation: float = 0.0
    # implicit surface sampling
    implicit_resolution: int = 6
    implicit_threshold_factor: float = 1.2
    implicit_node_factor: float = 0.4
    implicit_strut_factor: float = 0.2
    # void fraction calibration
    void_estimate: VoidEstimate = "base_offset"
    void_base: float = 0.2
    void_offset_scale: float = 0.0
    void_correction: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _pairs_within(positions: Tuple[Vec3, ...], max_distance: float) -> List[Tuple[int, int]]:
    """Index pairs of unit-cell nodes no further apart than max_distance."""
    pairs = []
    for i, j in combinations(range(len(positions)), 2):
        if math.dist(positions[i], positions[j]) <= max_distance + 1e-9:
            pairs.append((i, j))
    return pairs


_CUBE_CORNERS: Tuple[Vec3, ...] = tuple(
    (float(i & 1), float((i >> 1) & 1), float((i >> 2) & 1)) for i in range(8)
)

_BCC_NODES: Tuple[Vec3, ...] = ((0.5, 0.5, 0.5),) + _CUBE_CORNERS

_BCC_BONDS: Tuple[BondSpec, ...] = (
    # center to the neighboring cell centers across the radial faces
    BondSpec(0, 0, 1.0, 0.5, (0, 1, 0)),
    BondSpec(0, 0, 1.0, 0.5, (0, 0, 1)),
    BondSpec(0, 0, 1.0, 0.5, (0, -1, 0)),
    BondSpec(0, 0, 1.0, 0.5, (0, 0, -1)),
    BondSpec(0, 0, 0.4, 0.3, (1, 0, 0)),
) + tuple(BondSpec(0, k, 0.4, 0.3) for k in range(1, 9))

_FCC_NODES: Tuple[Vec3, ...] = (
    (0.0, 0.5, 0.5),
    (1.0, 0.5, 0.5),
    (0.5, 0.0, 0.5),
    (0.5, 1.0, 0.5),
    (0.5, 0.5, 0.0),
    (0.5, 0.5, 1.0),
)

_FCC_BONDS: Tuple[BondSpec, ...] = tuple(
    BondSpec(i, j, 0.7, 0.4) for i, j in _pairs_within(_FCC_NODES, math.sqrt(2.0))
)

_DIAMOND_NODES: Tuple[Vec3, ...] = (
    (0.0, 0.0, 0.0),
    (0.0, 0.5, 0.5),
    (0.5, 0.0, 0.5),
    (0.5, 0.5, 0.0),
    (0.25, 0.25, 0.25),
    (0.25, 0.75, 0.75),
    (0.75, 0.25, 0.75),
    (0.75, 0.75, 0.25),
)

_DIAMOND_BONDS: Tuple[BondSpec, ...] = tuple(
    BondSpec(i, j, 0.7, 0.3)
    for i, j in (
        (0, 4), (1, 5), (2, 6), (3, 7),
        (4, 5), (4, 6), (4, 7), (5, 6), (5, 7), (6, 7),
    )
)

_OCTET_EDGES = (
    (0, 4), (1, 5), (2, 6), (3, 7),
    (0, 2), (1, 3), (4, 6), (5, 7),
    (0, 1), (2, 3), (4, 5), (6, 7),
)

_OCTET_BONDS: Tuple[BondSpec, ...] = tuple(
    BondSpec(i, j, 0.7, 0.3) for i, j in _OCTET_EDGES
) + tuple(
    BondSpec(i, j, 0.3, 0.3) for i, j in ((0, 7), (1, 6), (2, 5), (3, 4))
)


LATTICE_FAMILIES: Dict[str, LatticeFamilyConfig] = {
    "none": LatticeFamilyConfig(
        name="none",
        strategy="none",
        combine_mode="none",
        void_estimate="none",
        void_base=0.0,
    ),
    "bcc": LatticeFamilyConfig(
        name="bcc",
        strategy="periodic",
        combine_mode="union_subtract",
        node_positions=_BCC_NODES,
        bonds=_BCC_BONDS,
        node_radius_factor=0.8,
    ),
    "fcc": LatticeFamilyConfig(
        name="fcc",
        strategy="periodic",
        combine_mode="union_subtract",
        node_positions=_FCC_NODES,
        bonds=_FCC_BONDS,
        node_radius_factor=1.0,
    ),
    "diamond": LatticeFamilyConfig(
        name="diamond",
        strategy="periodic",
        combine_mode="union_subtract",
        node_positions=_DIAMOND_NODES,
        bonds=_DIAMOND_BONDS,
        node_radius_factor=1.0,
        void_base=0.35,
        void_offset_scale=0.3,
    ),
    "octet": LatticeFamilyConfig(
        name="octet",
        strategy="periodic",
        combine_mode="union_subtract",
        node_positions=_CUBE_CORNERS,
        bonds=_OCTET_BONDS,
        node_radius_factor=1.0,
    ),
    "gyroid": LatticeFamilyConfig(
        name="gyroid",
        strategy="implicit",
        combine_mode="union_subtract",
        implicit_resolution=6,
        implicit_threshold_factor=1.2,
        implicit_node_factor=0.4,
        implicit_strut_factor=0.2,
        void_base=0.4,
        void_offset_scale=0.35,
    ),
    "vertical": LatticeFamilyConfig(
        name="vertical",
        strategy="perpendicular",
        combine_mode="iterative_subtract",
        spacing_factor=2.0,
        hole_angles_deg=(0.0,),
        hole_radius_factor=1.0,
        void_estimate="feature_count",
        void_correction=0.8,
    ),
    "simple-vertical": LatticeFamilyConfig(
        name="simple-vertical",
        strategy="perpendicular",
        combine_mode="iterative_subtract",
        spacing_factor=2.0,
        hole_angles_deg=(0.0,),
        hole_radius_factor=1.0,
        connector_radius_factor=0.8,
        void_estimate="feature_count",
        void_correction=0.5,
    ),
    "vertical-grid": LatticeFamilyConfig(
        name="vertical-grid",
        strategy="perpendicular",
        combine_mode="iterative_subtract",
        spacing_factor=2.0,
        hole_angles_deg=(0.0, 90.0),
        hole_radius_factor=1.0,
        scale_by_offset=True,
        grid_extent_factor=0.9,
        void_base=0.25,
        void_offset_scale=0.2,
    ),
    "vertical-cross": LatticeFamilyConfig(
        name="vertical-cross",
        strategy="perpendicular",
        combine_mode="iterative_subtract",
        spacing_factor=3.0,
        hole_angles_deg=(0.0, 90.0),
        hole_radius_factor=1.0,
        diagonal_angles_deg=(45.0, 135.0),
        diagonal_radius_factor=0.8,
        scale_by_offset=True,
        void_base=0.3,
        void_offset_scale=0.25,
    ),
    "vertical-diamond": LatticeFamilyConfig(
        name="vertical-diamond",
        strategy="perpendicular",
        combine_mode="iterative_subtract",
        spacing_factor=2.5,
        hole_angles_deg=(0.0, 45.0, 90.0, 135.0),
        hole_radius_factor=1.0,
        scale_by_offset=True,
        void_base=0.35,
        void_offset_scale=0.3,
    ),
    "vertical-gyroid": LatticeFamilyConfig(
        name="vertical-gyroid",
        strategy="perpendicular",
        combine_mode="iterative_subtract",
        spacing_factor=2.0,
        hole_angles_deg=(0.0, 30.0, 60.0, 90.0, 120.0, 150.0),
        hole_radius_factor=0.8,
        scale_by_offset=True,
        angular_drift=0.2,
        radius_modulation=0.2,
        void_base=0.4,
        void_offset_scale=0.35,
    ),
}


def get_family_config(lattice_type: str) -> LatticeFamilyConfig:
    """
    Look up the configuration for a lattice family.

    Raises
    ------
    ValueError
        If the family name is unknown.
    """
    try:
        return LATTICE_FAMILIES[lattice_type]
    except KeyError:
        raise ValueError(
            f"Unknown lattice type '{lattice_type}'. "
            f"Valid types: {sorted(LATTICE_FAMILIES)}"
        ) from None


_FIXED_FIELDS = frozenset({"name", "strategy", "combine_mode", "node_positions", "bonds"})


def apply_family_overrides(
    config: LatticeFamilyConfig,
    overrides: Optional[Dict[str, Any]],
) -> LatticeFamilyConfig:
    """
    Return a copy of ``config`` with generation fields replaced.

    Only generation tunables can be overridden; identity, combination mode,
    unit-cell layout and void-estimate calibration stay fixed.

    Raises
    ------
    ValueError
        If a key is not an overridable field.
    """
    if not overrides:
        return config

    allowed = {
        name for name in LatticeFamilyConfig.__dataclass_fields__
        if name not in _FIXED_FIELDS and not name.startswith("void_")
    }
    rejected = sorted(set(overrides) - allowed)
    if rejected:
        raise ValueError(
            f"Cannot override {rejected} of lattice family '{config.name}'. "
            f"Overridable fields: {sorted(allowed)}"
        )

    values = {k: tuple(v) if isinstance(v, list) else v for k, v in overrides.items()}
    return replace(config, **values)


__all__ = [
    "BondSpec",
    "LatticeFamilyConfig",
    "LATTICE_FAMILIES",
    "get_family_config",
    "apply_family_overrides",
]
