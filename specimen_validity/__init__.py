"""
Specimen validity: advisory parameter validation and solid checks.

Usage:
    from specimen_validity import validate_specimen, check_solid

    result = validate_specimen(params, standard="E606")
    if not result.valid:
        print(result.message)
"""

from .api import (
    ValidationResult,
    SolidCheckReport,
    validate_specimen,
    check_solid,
)

__all__ = [
    "ValidationResult",
    "SolidCheckReport",
    "validate_specimen",
    "check_solid",
]
