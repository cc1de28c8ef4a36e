"""Player and league models."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

from talentscout.core.attributes import PlayerAttributes
from talentscout.core.enums import Position


@dataclass
class Player:
    """
    Represents an individual football player.

    Everything here is ground truth owned by world generation. The
    assessment engine reads it, never writes it, and only consults the
    hidden fields (attributes, current/potential ability) when scoring.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    first_name: str = ""
    last_name: str = ""
    position: Position = Position.CM
    attributes: PlayerAttributes = field(default_factory=PlayerAttributes)
    age: int = 21

    # Hidden ability on the internal 1-200 scale
    current_ability: int = 100
    potential_ability: int = 120

    # Condition
    form: int = 0  # -3 (dreadful) to +3 (flying)
    morale: int = 7  # 1-10
    injured: bool = False

    # Contract and club
    club_id: Optional[str] = None
    contract_expiry: int = 0  # Season the current deal runs out

    # Personality traits the scout has already uncovered
    personality_revealed: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not -3 <= self.form <= 3:
            raise ValueError(f"Form must be -3 to 3, got {self.form}")
        if not 1 <= self.morale <= 10:
            raise ValueError(f"Morale must be 1-10, got {self.morale}")
        if not 1 <= self.current_ability <= 200:
            raise ValueError(f"Current ability must be 1-200, got {self.current_ability}")
        if not 1 <= self.potential_ability <= 200:
            raise ValueError(f"Potential ability must be 1-200, got {self.potential_ability}")

    @property
    def full_name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position.value,
            "attributes": self.attributes.to_dict(),
            "age": self.age,
            "current_ability": self.current_ability,
            "potential_ability": self.potential_ability,
            "form": self.form,
            "morale": self.morale,
            "injured": self.injured,
            "club_id": self.club_id,
            "contract_expiry": self.contract_expiry,
            "personality_revealed": list(self.personality_revealed),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from dictionary."""
        return cls(
            id=data["id"] if "id" in data else str(uuid4()),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            position=Position(data.get("position", "CM")),
            attributes=PlayerAttributes.from_dict(data.get("attributes", {})),
            age=data.get("age", 21),
            current_ability=data.get("current_ability", 100),
            potential_ability=data.get("potential_ability", 120),
            form=data.get("form", 0),
            morale=data.get("morale", 7),
            injured=data.get("injured", False),
            club_id=data.get("club_id"),
            contract_expiry=data.get("contract_expiry", 0),
            personality_revealed=list(data.get("personality_revealed", [])),
        )


@dataclass
class League:
    """A league is a named set of clubs; a player belongs by club."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    club_ids: list[str] = field(default_factory=list)

    def contains(self, player: Player) -> bool:
        """Check whether a player plays for one of this league's clubs."""
        return player.club_id is not None and player.club_id in self.club_ids

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "club_ids": list(self.club_ids)}

    @classmethod
    def from_dict(cls, data: dict) -> "League":
        return cls(
            id=data["id"] if "id" in data else str(uuid4()),
            name=data.get("name", ""),
            club_ids=list(data.get("club_ids", [])),
        )
