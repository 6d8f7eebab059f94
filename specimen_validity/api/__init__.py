"""
Public API for the specimen_validity package.
"""

from .validate import (
    ValidationResult,
    SolidCheckReport,
    validate_specimen,
    check_solid,
    VALID_MESSAGE,
)

__all__ = [
    "ValidationResult",
    "SolidCheckReport",
    "validate_specimen",
    "check_solid",
    "VALID_MESSAGE",
]
