"""
Scout model.

A scout's skills calibrate how much noise sits between the truth and
what the scout perceives. Data literacy governs statistical work; the
other four skills map onto attribute domains.
"""

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4


class ScoutSkill(str, Enum):
    """Scout skill areas, each rated 1-20."""

    TECHNICAL_EYE = "technical_eye"
    PHYSICAL_ASSESSMENT = "physical_assessment"
    PSYCHOLOGICAL_READ = "psychological_read"
    TACTICAL_UNDERSTANDING = "tactical_understanding"
    DATA_LITERACY = "data_literacy"


class ScoutSpecialization(str, Enum):
    """Scout career paths."""

    YOUTH = "youth"
    FIRST_TEAM = "first_team"
    REGIONAL = "regional"
    DATA = "data"


DEFAULT_SKILL_LEVEL = 10


def _default_skills() -> dict[ScoutSkill, int]:
    return {skill: DEFAULT_SKILL_LEVEL for skill in ScoutSkill}


@dataclass
class Scout:
    """The player character (or an NPC scout)."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    specialization: ScoutSpecialization = ScoutSpecialization.FIRST_TEAM
    skills: dict[ScoutSkill, int] = field(default_factory=_default_skills)

    def __post_init__(self) -> None:
        for skill, level in self.skills.items():
            if not 1 <= level <= 20:
                raise ValueError(f"Skill {skill.value} must be 1-20, got {level}")

    def skill(self, skill: ScoutSkill) -> int:
        """Get a skill level, defaulting to 10 if not rated."""
        return self.skills.get(skill, DEFAULT_SKILL_LEVEL)

    @property
    def data_literacy(self) -> int:
        return self.skill(ScoutSkill.DATA_LITERACY)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "specialization": self.specialization.value,
            "skills": {skill.value: level for skill, level in self.skills.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Scout":
        """Create from dictionary."""
        skills = _default_skills()
        for key, level in data.get("skills", {}).items():
            skills[ScoutSkill(key)] = level
        return cls(
            id=data["id"] if "id" in data else str(uuid4()),
            name=data.get("name", ""),
            specialization=ScoutSpecialization(data.get("specialization", "first_team")),
            skills=skills,
        )
