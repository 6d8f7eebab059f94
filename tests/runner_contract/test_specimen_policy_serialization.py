"""
Test that policies serialize to JSON and round-trip through from_dict.
"""

import json

import pytest


class TestGenerationPolicySerialization:
    """Test generation policies round-trip."""

    @pytest.mark.parametrize("policy_name", [
        "ProfilePolicy",
        "LatticePolicy",
        "CombinePolicy",
        "VolumePolicy",
        "OutputPolicy",
        "SolidCheckPolicy",
    ])
    def test_round_trip(self, policy_name):
        """Test to_dict -> JSON -> from_dict preserves every field."""
        import specimen_policies

        cls = getattr(specimen_policies, policy_name)
        policy = cls()
        restored = cls.from_dict(json.loads(json.dumps(policy.to_dict())))
        assert restored == policy

    def test_unknown_keys_ignored(self):
        """Test from_dict drops keys that are not fields."""
        from specimen_policies import LatticePolicy

        policy = LatticePolicy.from_dict({"seed": 9, "not_a_field": True})
        assert policy.seed == 9

    def test_validation_policy_rules_round_trip(self):
        """Test ValidationPolicy keeps per-standard rules."""
        from specimen_policies import ValidationPolicy, ValidationStandardRule

        policy = ValidationPolicy(min_fillet_multiplier=3.0)
        policy.rules["E9"] = ValidationStandardRule("E9", min_ratio=1.0, message="short")
        restored = ValidationPolicy.from_dict(json.loads(json.dumps(policy.to_dict())))

        assert restored.min_fillet_multiplier == 3.0
        assert restored.rule_for("E9").message == "short"
        assert restored.rule_for("E606").max_ratio == 3.0


class TestLatticeFamilySerialization:
    """Test lattice family table is serializable."""

    def test_every_family_dumps(self):
        """Test every family config is JSON-serializable."""
        from specimen_policies import LATTICE_FAMILIES

        for name, config in LATTICE_FAMILIES.items():
            data = json.loads(json.dumps(config.to_dict()))
            assert data["name"] == name

    def test_unknown_family(self):
        """Test unknown family names raise ValueError."""
        from specimen_policies import get_family_config

        with pytest.raises(ValueError, match="Unknown lattice type"):
            get_family_config("kagome")


class TestSpecimenParamsSerialization:
    """Test SpecimenParams accepts snake_case and camelCase keys."""

    def test_camel_case_keys(self):
        """Test camelCase keys map onto fields."""
        from specimen.core.types import SpecimenParams

        params = SpecimenParams.from_dict({"gaugeDiameter": 6.0, "latticeType": "gyroid"})
        assert params.gauge_diameter == 6.0
        assert params.lattice_type == "gyroid"

    def test_updated_from_overrides_existing(self):
        """Test camelCase overrides win over an existing value."""
        from specimen.core.types import SpecimenParams

        params = SpecimenParams(gauge_length=30.0).updated_from({"gaugeLength": 12.0})
        assert params.gauge_length == 12.0

    def test_round_trip(self):
        """Test to_dict/from_dict round-trip."""
        from specimen.core.types import SpecimenParams

        params = SpecimenParams(use_tapered_transition=True, taper_angle=9.0)
        assert SpecimenParams.from_dict(json.loads(json.dumps(params.to_dict()))) == params
