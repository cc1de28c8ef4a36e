"""Pydantic schemas for players, scouts and leagues."""

from typing import Optional

from pydantic import BaseModel, Field

from talentscout.core.attributes import PlayerAttributes
from talentscout.core.enums import Position
from talentscout.core.models import League, Player, Scout, ScoutSkill, ScoutSpecialization


class PlayerSchema(BaseModel):
    """Player ground truth as handed over by world generation."""

    id: str
    first_name: str
    last_name: str
    position: Position = Position.CM
    age: int = 21

    # Hidden ability
    current_ability: int = Field(100, ge=1, le=200, description="Internal 1-200 scale")
    potential_ability: int = Field(120, ge=1, le=200, description="Internal 1-200 scale")

    form: int = Field(0, ge=-3, le=3)
    morale: int = Field(7, ge=1, le=10)
    injured: bool = False
    club_id: Optional[str] = None
    contract_expiry: int = Field(0, description="Season the current deal runs out")
    personality_revealed: list[str] = Field(default_factory=list)

    attributes: dict[str, int] = Field(
        default_factory=dict, description="Attribute name -> 1-20 value"
    )

    @classmethod
    def from_model(cls, player: Player) -> "PlayerSchema":
        """Create from Player model."""
        return cls(
            id=player.id,
            first_name=player.first_name,
            last_name=player.last_name,
            position=player.position,
            age=player.age,
            current_ability=player.current_ability,
            potential_ability=player.potential_ability,
            form=player.form,
            morale=player.morale,
            injured=player.injured,
            club_id=player.club_id,
            contract_expiry=player.contract_expiry,
            personality_revealed=list(player.personality_revealed),
            attributes=player.attributes.to_dict(),
        )

    def to_model(self) -> Player:
        """Build the engine's Player model."""
        return Player(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            position=self.position,
            attributes=PlayerAttributes.from_dict(self.attributes),
            age=self.age,
            current_ability=self.current_ability,
            potential_ability=self.potential_ability,
            form=self.form,
            morale=self.morale,
            injured=self.injured,
            club_id=self.club_id,
            contract_expiry=self.contract_expiry,
            personality_revealed=list(self.personality_revealed),
        )


class ScoutSchema(BaseModel):
    """A scout and their skill ratings."""

    id: str
    name: str = ""
    specialization: ScoutSpecialization = ScoutSpecialization.FIRST_TEAM
    skills: dict[ScoutSkill, int] = Field(
        default_factory=dict, description="Skill -> 1-20 rating; unrated skills default to 10"
    )

    @classmethod
    def from_model(cls, scout: Scout) -> "ScoutSchema":
        """Create from Scout model."""
        return cls(
            id=scout.id,
            name=scout.name,
            specialization=scout.specialization,
            skills=dict(scout.skills),
        )

    def to_model(self) -> Scout:
        return Scout.from_dict(self.model_dump(mode="json"))


class LeagueSchema(BaseModel):
    """A league and its member clubs."""

    id: str
    name: str = ""
    club_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_model(cls, league: League) -> "LeagueSchema":
        return cls(id=league.id, name=league.name, club_ids=list(league.club_ids))

    def to_model(self) -> League:
        return League(id=self.id, name=self.name, club_ids=list(self.club_ids))
