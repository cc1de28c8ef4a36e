"""Shared pytest fixtures for TalentScout tests."""

import random
from typing import Optional

import pytest

from talentscout.core.attributes import AttributeRegistry, PlayerAttributes
from talentscout.core.config import reset_config
from talentscout.core.enums import Position
from talentscout.core.models import (
    AttributeReading,
    League,
    MomentType,
    Observation,
    Player,
    PlayerMoment,
    Scout,
    ScoutSkill,
)


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so randomized tests are reproducible."""
    return random.Random(42)


# =============================================================================
# Scout Fixtures
# =============================================================================


def make_scout(
    level: int = 10,
    data_literacy: Optional[int] = None,
    scout_id: str = "scout-1",
) -> Scout:
    skills = {skill: level for skill in ScoutSkill}
    if data_literacy is not None:
        skills[ScoutSkill.DATA_LITERACY] = data_literacy
    return Scout(id=scout_id, name="Pat Keane", skills=skills)


@pytest.fixture
def scout() -> Scout:
    """An average scout (every skill 10)."""
    return make_scout()


@pytest.fixture
def expert_scout() -> Scout:
    return make_scout(level=18, data_literacy=18, scout_id="scout-expert")


@pytest.fixture
def novice_scout() -> Scout:
    return make_scout(level=4, data_literacy=4, scout_id="scout-novice")


# =============================================================================
# Player Fixtures
# =============================================================================


def make_player(
    player_id: str,
    position: Position = Position.CM,
    level: int = 10,
    club_id: str = "club-a",
    **kwargs,
) -> Player:
    """Player with every attribute at one level; kwargs override Player fields."""
    attrs = PlayerAttributes()
    for name in AttributeRegistry.all_names():
        attrs.set(name, level)
    overrides = kwargs.pop("attributes", {})
    for name, value in overrides.items():
        attrs.set(name, value)
    return Player(
        id=player_id,
        first_name="Test",
        last_name=player_id.title(),
        position=position,
        attributes=attrs,
        club_id=club_id,
        **kwargs,
    )


@pytest.fixture
def player() -> Player:
    """A midfielder with every attribute at 12."""
    return make_player("player-1", position=Position.CM, level=12, age=24)


@pytest.fixture
def league() -> League:
    return League(id="league-1", name="Premier Division", club_ids=["club-a", "club-b"])


@pytest.fixture
def league_players() -> dict[str, Player]:
    """A spread of strikers and midfielders across both league clubs, plus an outsider."""
    players = [
        make_player("st-low", Position.ST, level=6),
        make_player("st-mid", Position.ST, level=11, club_id="club-b"),
        make_player("st-high", Position.ST, level=18, form=2),
        make_player("cm-low", Position.CM, level=7, age=19, club_id="club-b"),
        make_player("cm-mid", Position.CM, level=12, form=-2),
        make_player("cm-high", Position.CM, level=16, age=20),
        make_player("outsider", Position.ST, level=20, club_id="club-z"),
    ]
    return {p.id: p for p in players}


# =============================================================================
# Observation Fixtures
# =============================================================================


def make_observation(
    player_id: str,
    readings: dict[str, float],
    confidence: float = 0.8,
    observation_count: int = 1,
    week: int = 1,
) -> Observation:
    return Observation(
        player_id=player_id,
        scout_id="scout-1",
        week=week,
        season=1,
        attribute_readings=[
            AttributeReading(
                attribute=name,
                perceived_value=value,
                confidence=confidence,
                observation_count=observation_count,
            )
            for name, value in readings.items()
        ],
    )


def make_moment(
    player_id: str,
    moment_type: MomentType = MomentType.TECHNICAL_ACTION,
    quality: int = 8,
    vague_description: str = "",
) -> PlayerMoment:
    return PlayerMoment(
        player_id=player_id,
        moment_type=moment_type,
        quality=quality,
        description="A clean first touch under pressure",
        vague_description=vague_description,
    )


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def scout_factory():
    return make_scout


@pytest.fixture
def player_factory():
    return make_player


@pytest.fixture
def observation_factory():
    return make_observation


@pytest.fixture
def moment_factory():
    return make_moment
