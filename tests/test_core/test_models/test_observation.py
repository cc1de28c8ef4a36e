"""Tests for observation and moment models."""

import pytest

from talentscout.core.attributes import AttributeDomain
from talentscout.core.models import (
    AbilityReading,
    AttributeReading,
    MomentType,
    Observation,
    PlayerMoment,
)


class TestAttributeReading:

    def test_confidence_must_be_fraction(self):
        with pytest.raises(ValueError):
            AttributeReading(attribute="pace", perceived_value=12, confidence=1.2)

    def test_observation_count_at_least_one(self):
        with pytest.raises(ValueError):
            AttributeReading(attribute="pace", perceived_value=12, confidence=0.5, observation_count=0)

    def test_unknown_attribute_rejected(self):
        """Only registered attribute names can be read."""
        with pytest.raises(ValueError, match="Unknown attribute"):
            AttributeReading(attribute="technicalPassing", perceived_value=14, confidence=0.5)

    @pytest.mark.parametrize("value", [0.5, 20.5, 250])
    def test_value_on_scale(self, value):
        with pytest.raises(ValueError):
            AttributeReading(attribute="pace", perceived_value=value, confidence=0.5)


class TestAbilityReading:

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError, match="inverted"):
            AbilityReading(perceived_ca=2.5, perceived_pa_low=4.0, perceived_pa_high=3.0)


class TestObservation:

    def test_from_dict_restores_readings(self):
        original = Observation(
            player_id="p1",
            scout_id="s1",
            week=4,
            season=2,
            attribute_readings=[AttributeReading("passing", 13.5, 0.7, 3)],
            ability_reading=AbilityReading(2.5, 3.0, 4.0),
        )
        restored = Observation.from_dict(original.to_dict())

        assert restored.id == original.id
        assert restored.attribute_readings[0].perceived_value == 13.5
        assert restored.attribute_readings[0].observation_count == 3
        assert restored.ability_reading.perceived_pa_high == 4.0

    def test_without_ability_reading(self):
        restored = Observation.from_dict(Observation(player_id="p1").to_dict())
        assert restored.ability_reading is None


class TestPlayerMoment:

    def test_moment_type_domains(self):
        """Character reveals feed the hidden domain."""
        assert MomentType.TECHNICAL_ACTION.domain == AttributeDomain.TECHNICAL
        assert MomentType.CHARACTER_REVEAL.domain == AttributeDomain.HIDDEN

    @pytest.mark.parametrize("quality", [0, 11])
    def test_quality_range(self, quality):
        with pytest.raises(ValueError):
            PlayerMoment(player_id="p1", moment_type=MomentType.PHYSICAL_TEST, quality=quality)
