"""
Observation models.

Produced by the match/session simulator and consumed read-only by the
assessment engine. An Observation is one session's attribute readings for
one player; a PlayerMoment is a single qualitative event that can spark
or feed a hypothesis.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import uuid4

from talentscout.core.attributes import AttributeDomain, AttributeRegistry


@dataclass
class AttributeReading:
    """A scout's perceived value for one attribute in one session."""

    attribute: str
    perceived_value: float  # 1-20 scale, may be fractional
    confidence: float  # 0-1 weight of this reading
    observation_count: int = 1  # Cumulative looks behind the reading

    def __post_init__(self) -> None:
        if not AttributeRegistry.is_registered(self.attribute):
            raise ValueError(f"Unknown attribute: {self.attribute}")
        if not 1.0 <= self.perceived_value <= 20.0:
            raise ValueError(f"Perceived value must be 1-20, got {self.perceived_value}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0-1, got {self.confidence}")
        if self.observation_count < 1:
            raise ValueError(
                f"Observation count must be at least 1, got {self.observation_count}"
            )

    def to_dict(self) -> dict:
        return {
            "attribute": self.attribute,
            "perceived_value": self.perceived_value,
            "confidence": self.confidence,
            "observation_count": self.observation_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttributeReading":
        return cls(
            attribute=data["attribute"],
            perceived_value=data["perceived_value"],
            confidence=data["confidence"],
            observation_count=data.get("observation_count", 1),
        )


@dataclass
class AbilityReading:
    """Perceived current ability and potential range, in stars (0.5-5.0)."""

    perceived_ca: float
    perceived_pa_low: float
    perceived_pa_high: float

    def __post_init__(self) -> None:
        if self.perceived_pa_low > self.perceived_pa_high:
            raise ValueError(
                f"PA range is inverted: {self.perceived_pa_low} > {self.perceived_pa_high}"
            )

    def to_dict(self) -> dict:
        return {
            "perceived_ca": self.perceived_ca,
            "perceived_pa_low": self.perceived_pa_low,
            "perceived_pa_high": self.perceived_pa_high,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AbilityReading":
        return cls(
            perceived_ca=data["perceived_ca"],
            perceived_pa_low=data["perceived_pa_low"],
            perceived_pa_high=data["perceived_pa_high"],
        )


@dataclass
class Observation:
    """One scouting session's yield for one player."""

    player_id: str
    scout_id: str = ""
    week: int = 1
    season: int = 1
    attribute_readings: list[AttributeReading] = field(default_factory=list)
    ability_reading: Optional[AbilityReading] = None
    id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "player_id": self.player_id,
            "scout_id": self.scout_id,
            "week": self.week,
            "season": self.season,
            "attribute_readings": [r.to_dict() for r in self.attribute_readings],
            "ability_reading": self.ability_reading.to_dict() if self.ability_reading else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Observation":
        """Create from dictionary."""
        ability = data.get("ability_reading")
        return cls(
            id=data["id"] if "id" in data else str(uuid4()),
            player_id=data["player_id"],
            scout_id=data.get("scout_id", ""),
            week=data.get("week", 1),
            season=data.get("season", 1),
            attribute_readings=[
                AttributeReading.from_dict(r) for r in data.get("attribute_readings", [])
            ],
            ability_reading=AbilityReading.from_dict(ability) if ability else None,
        )


class MomentType(str, Enum):
    """Kinds of qualitative moment a scout can witness."""

    TECHNICAL_ACTION = "technical_action"
    PHYSICAL_TEST = "physical_test"
    MENTAL_RESPONSE = "mental_response"
    TACTICAL_DECISION = "tactical_decision"
    CHARACTER_REVEAL = "character_reveal"

    @property
    def domain(self) -> AttributeDomain:
        """The attribute domain this kind of moment speaks to."""
        return MOMENT_DOMAINS[self]


MOMENT_DOMAINS: dict[MomentType, AttributeDomain] = {
    MomentType.TECHNICAL_ACTION: AttributeDomain.TECHNICAL,
    MomentType.PHYSICAL_TEST: AttributeDomain.PHYSICAL,
    MomentType.MENTAL_RESPONSE: AttributeDomain.MENTAL,
    MomentType.TACTICAL_DECISION: AttributeDomain.TACTICAL,
    MomentType.CHARACTER_REVEAL: AttributeDomain.HIDDEN,
}


@dataclass
class PlayerMoment:
    """A single qualitative observation event."""

    player_id: str
    moment_type: MomentType
    quality: int  # 1-10
    attributes_hinted: list[str] = field(default_factory=list)
    description: str = ""
    vague_description: str = ""
    pressure_context: bool = False
    is_standout: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        if not 1 <= self.quality <= 10:
            raise ValueError(f"Moment quality must be 1-10, got {self.quality}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "player_id": self.player_id,
            "moment_type": self.moment_type.value,
            "quality": self.quality,
            "attributes_hinted": list(self.attributes_hinted),
            "description": self.description,
            "vague_description": self.vague_description,
            "pressure_context": self.pressure_context,
            "is_standout": self.is_standout,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerMoment":
        return cls(
            id=data["id"] if "id" in data else str(uuid4()),
            player_id=data["player_id"],
            moment_type=MomentType(data["moment_type"]),
            quality=data["quality"],
            attributes_hinted=list(data.get("attributes_hinted", [])),
            description=data.get("description", ""),
            vague_description=data.get("vague_description", ""),
            pressure_context=data.get("pressure_context", False),
            is_standout=data.get("is_standout", False),
        )
