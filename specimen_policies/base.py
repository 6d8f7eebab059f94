"""
Base utilities for specimen policies.

This module provides the OperationReport dataclass returned by every
policy-driven operation, and the key aliasing used when parameters arrive
from form/JSON collaborators.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List
import json


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Apply field aliases to a dictionary.

    A camelCase key is renamed to its snake_case field unless the field is
    already present.

    Parameters
    ----------
    d : dict
        Input dictionary
    aliases : dict
        Mapping of alias_name -> canonical_name

    Returns
    -------
    dict
        Dictionary with aliases applied
    """
    result = d.copy()
    for alias_name, canonical_name in aliases.items():
        if alias_name in result and canonical_name not in result:
            result[canonical_name] = result.pop(alias_name)
    return result


@dataclass
class OperationReport:
    """
    Standard report structure for all operations.

    Every operation returns a report with requested vs effective policy,
    warnings, errors and operation-specific metadata. ``success`` turns
    False as soon as an error is recorded.
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message and mark as failed."""
        self.errors.append(message)
        self.success = False


__all__ = [
    "OperationReport",
    "alias_fields",
]
