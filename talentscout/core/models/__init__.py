"""Domain models consumed by the assessment engine."""

from talentscout.core.models.observation import (
    AbilityReading,
    AttributeReading,
    MomentType,
    Observation,
    PlayerMoment,
)
from talentscout.core.models.player import League, Player
from talentscout.core.models.scout import Scout, ScoutSkill, ScoutSpecialization

__all__ = [
    "AbilityReading",
    "AttributeReading",
    "League",
    "MomentType",
    "Observation",
    "Player",
    "PlayerMoment",
    "Scout",
    "ScoutSkill",
    "ScoutSpecialization",
]
