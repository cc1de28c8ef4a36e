"""Pydantic schemas for simulator output: observations and moments."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from talentscout.core.attributes import AttributeRegistry
from talentscout.core.models import (
    AbilityReading,
    AttributeReading,
    MomentType,
    Observation,
    PlayerMoment,
)


class AttributeReadingSchema(BaseModel):
    attribute: str
    perceived_value: float = Field(..., ge=1, le=20, description="Perceived 1-20 value, may be fractional")
    confidence: float = Field(..., ge=0.0, le=1.0)
    observation_count: int = Field(1, ge=1, description="Cumulative looks behind the reading")

    @field_validator("attribute")
    @classmethod
    def check_attribute(cls, v: str) -> str:
        if not AttributeRegistry.is_registered(v):
            raise ValueError(f"Unknown attribute: {v}")
        return v


class AbilityReadingSchema(BaseModel):
    """Perceived ability in stars (0.5-5.0)."""

    perceived_ca: float
    perceived_pa_low: float
    perceived_pa_high: float

    @model_validator(mode="after")
    def check_range(self) -> "AbilityReadingSchema":
        if self.perceived_pa_low > self.perceived_pa_high:
            raise ValueError("perceived_pa_low must not exceed perceived_pa_high")
        return self


class ObservationSchema(BaseModel):
    """One session's readings for one player."""

    id: str
    player_id: str
    scout_id: str = ""
    week: int = Field(1, ge=1)
    season: int = Field(1, ge=1)
    attribute_readings: list[AttributeReadingSchema] = Field(default_factory=list)
    ability_reading: Optional[AbilityReadingSchema] = None

    @classmethod
    def from_model(cls, observation: Observation) -> "ObservationSchema":
        """Create from Observation model."""
        return cls.model_validate(observation.to_dict())

    def to_model(self) -> Observation:
        return Observation(
            id=self.id,
            player_id=self.player_id,
            scout_id=self.scout_id,
            week=self.week,
            season=self.season,
            attribute_readings=[
                AttributeReading(**reading.model_dump()) for reading in self.attribute_readings
            ],
            ability_reading=(
                AbilityReading(**self.ability_reading.model_dump())
                if self.ability_reading
                else None
            ),
        )


class PlayerMomentSchema(BaseModel):
    """A single qualitative event witnessed by a scout."""

    id: str
    player_id: str
    moment_type: MomentType
    quality: int = Field(..., ge=1, le=10)
    attributes_hinted: list[str] = Field(default_factory=list)
    description: str = ""
    vague_description: str = Field(
        "", description="Shown instead of description when the scout's read is poor"
    )
    pressure_context: bool = False
    is_standout: bool = False

    @classmethod
    def from_model(cls, moment: PlayerMoment) -> "PlayerMomentSchema":
        return cls.model_validate(moment.to_dict())

    def to_model(self) -> PlayerMoment:
        return PlayerMoment.from_dict(self.model_dump())
