"""
Validity policies for specimen parameter checks.

This module contains the policy dataclasses used by the specimen_validity
package. All policies are JSON-serializable.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS. Angles are in DEGREES.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class ValidationStandardRule:
    """
    Gauge length / gauge diameter ratio bounds for one test standard.

    A bound of None means the standard does not constrain that side.
    """
    standard: str
    min_ratio: Optional[float] = None
    max_ratio: Optional[float] = None
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


STANDARD_RULES: Dict[str, ValidationStandardRule] = {
    "E466": ValidationStandardRule(
        standard="E466",
        min_ratio=2.0,
        message="For E466, gauge length should be at least 2 times the gauge diameter.",
    ),
    "E606": ValidationStandardRule(
        standard="E606",
        min_ratio=1.5,
        max_ratio=3.0,
        message="For E606, gauge length should be between 1.5 and 3 times the gauge diameter.",
    ),
    "E8": ValidationStandardRule(standard="E8"),
}


@dataclass
class ValidationPolicy:
    """
    Policy for specimen parameter validation.

    JSON Schema:
    {
        "min_fillet_multiplier": float,
        "taper_angle_min": float (degrees),
        "taper_angle_max": float (degrees),
        "rules": {standard: ValidationStandardRule}
    }
    """
    min_fillet_multiplier: float = 4.0
    taper_angle_min: float = 7.0
    taper_angle_max: float = 10.0
    rules: Dict[str, ValidationStandardRule] = field(default_factory=lambda: dict(STANDARD_RULES))

    def rule_for(self, standard: str) -> Optional[ValidationStandardRule]:
        return self.rules.get(standard)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_fillet_multiplier": self.min_fillet_multiplier,
            "taper_angle_min": self.taper_angle_min,
            "taper_angle_max": self.taper_angle_max,
            "rules": {name: rule.to_dict() for name, rule in self.rules.items()},
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ValidationPolicy":
        rules = dict(STANDARD_RULES)
        for name, rule in (d.get("rules") or {}).items():
            rules[name] = ValidationStandardRule(**{
                k: v for k, v in rule.items() if k in ValidationStandardRule.__dataclass_fields__
            })
        return cls(
            min_fillet_multiplier=d.get("min_fillet_multiplier", 4.0),
            taper_angle_min=d.get("taper_angle_min", 7.0),
            taper_angle_max=d.get("taper_angle_max", 10.0),
            rules=rules,
        )


@dataclass
class SolidCheckPolicy:
    """
    Policy for checks run on produced solids.

    JSON Schema:
    {
        "check_watertight": bool,
        "check_components": bool,
        "max_components": int
    }
    """
    check_watertight: bool = True
    check_components: bool = True
    max_components: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "SolidCheckPolicy":
        return SolidCheckPolicy(**{k: v for k, v in d.items() if k in SolidCheckPolicy.__dataclass_fields__})


__all__ = [
    "ValidationStandardRule",
    "STANDARD_RULES",
    "ValidationPolicy",
    "SolidCheckPolicy",
]
