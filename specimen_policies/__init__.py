"""
Specimen Policies - Centralized policy definitions for specimen generation.

This package provides all policy dataclasses used by the specimen and
specimen_validity packages. All policies are JSON-serializable and support
the "requested vs effective" pattern for tracking runtime adjustments.

Usage:
    from specimen_policies import LatticePolicy, CombinePolicy, OperationReport
    from specimen_policies.lattice import LATTICE_FAMILIES, get_family_config
    from specimen_policies.validity import ValidationPolicy
"""

from .base import (
    OperationReport,
    alias_fields,
)

from .generation import (
    ProfilePolicy,
    LatticePolicy,
    CombinePolicy,
    VolumePolicy,
    OutputPolicy,
)

from .lattice import (
    BondSpec,
    LatticeFamilyConfig,
    LATTICE_FAMILIES,
    get_family_config,
    apply_family_overrides,
)

from .validity import (
    ValidationStandardRule,
    STANDARD_RULES,
    ValidationPolicy,
    SolidCheckPolicy,
)

__all__ = [
    # Base
    "OperationReport",
    "alias_fields",
    # Generation
    "ProfilePolicy",
    "LatticePolicy",
    "CombinePolicy",
    "VolumePolicy",
    "OutputPolicy",
    # Lattice families
    "BondSpec",
    "LatticeFamilyConfig",
    "LATTICE_FAMILIES",
    "get_family_config",
    "apply_family_overrides",
    # Validity
    "ValidationStandardRule",
    "STANDARD_RULES",
    "ValidationPolicy",
    "SolidCheckPolicy",
]
