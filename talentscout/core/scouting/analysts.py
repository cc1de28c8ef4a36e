"""
Analytics department.

Data analysts are passive staff assigned to watch a league. Each week they
file a report highlighting a few players and flagging statistical
outliers. Report value depends on the analyst's skill and morale.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional
from uuid import uuid4

from talentscout.core.models.player import League, Player
from talentscout.core.numeric import clamp, round_half_up
from talentscout.core.scouting.profiling import AnomalyDirection, AnomalyFlag, Stat

logger = logging.getLogger(__name__)


class AnalystFocus(str, Enum):
    GENERAL = "general"
    YOUTH = "youth"
    UNDERVALUED = "undervalued"
    FORM_PLAYERS = "form_players"


FIRST_NAMES = [
    "Adam", "Alex", "Ben", "Chris", "Daniel", "Ed", "Finn", "George",
    "Harry", "Jamie", "Luke", "Max", "Nathan", "Oscar", "Sam", "Tom",
    "Amelia", "Anna", "Beth", "Chloe", "Elena", "Grace", "Hannah", "Kate",
    "Leah", "Maya", "Olivia", "Rachel", "Sofia", "Zoe",
]

LAST_NAMES = [
    "Bailey", "Barnes", "Bennett", "Campbell", "Clarke", "Cole", "Davies",
    "Edwards", "Fisher", "Foster", "Gibson", "Hart", "Holmes", "Hughes",
    "Kelly", "Lawrence", "Mason", "Mills", "Murray", "Newton", "Owen",
    "Palmer", "Patel", "Russell", "Shaw", "Stone", "Turner", "Ward",
]

BASE_MORALE = 70
BASE_SALARY = 50
SALARY_PER_SKILL = 30
MAX_HIGHLIGHTS = 5


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DataAnalyst:
    """An NPC analyst on the department payroll."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    skill: int = 8  # 1-20
    focus: AnalystFocus = AnalystFocus.GENERAL
    morale: int = BASE_MORALE  # 0-100
    tenure_weeks: int = 0
    weekly_salary: int = BASE_SALARY
    assigned_league_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not 1 <= self.skill <= 20:
            raise ValueError(f"Analyst skill must be 1-20, got {self.skill}")
        if not 0 <= self.morale <= 100:
            raise ValueError(f"Analyst morale must be 0-100, got {self.morale}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "skill": self.skill,
            "focus": self.focus.value,
            "morale": self.morale,
            "tenure_weeks": self.tenure_weeks,
            "weekly_salary": self.weekly_salary,
            "assigned_league_id": self.assigned_league_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DataAnalyst":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            skill=data.get("skill", 8),
            focus=AnalystFocus(data.get("focus", "general")),
            morale=data.get("morale", BASE_MORALE),
            tenure_weeks=data.get("tenure_weeks", 0),
            weekly_salary=data.get("weekly_salary", BASE_SALARY),
            assigned_league_id=data.get("assigned_league_id"),
        )


@dataclass
class AnalystReport:
    """One analyst's weekly output for one league."""

    id: str
    analyst_id: str
    league_id: str
    highlights: list[str] = field(default_factory=list)  # Player ids
    anomalies: list[AnomalyFlag] = field(default_factory=list)
    quality: int = 0  # 0-100
    week: int = 0
    season: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "analyst_id": self.analyst_id,
            "league_id": self.league_id,
            "highlights": list(self.highlights),
            "anomalies": [a.to_dict() for a in self.anomalies],
            "quality": self.quality,
            "week": self.week,
            "season": self.season,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalystReport":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            analyst_id=data["analyst_id"],
            league_id=data["league_id"],
            highlights=list(data.get("highlights", [])),
            anomalies=[AnomalyFlag.from_dict(a) for a in data.get("anomalies", [])],
            quality=data.get("quality", 0),
            week=data.get("week", 0),
            season=data.get("season", 0),
        )


# =============================================================================
# Helpers
# =============================================================================

def _composite(player: Player) -> float:
    """All-round rating scaled by current ability; weights highlight picks."""
    a = player.attributes
    rating = (
        a["shooting"] * 0.2
        + a["passing"] * 0.15
        + a["dribbling"] * 0.1
        + a["defensive_awareness"] * 0.1
        + a["composure"] * 0.1
        + a["positioning"] * 0.1
        + a["pace"] * 0.05
        + a["strength"] * 0.05
        + a["work_rate"] * 0.05
        + a["decision_making"] * 0.1
    )
    return rating * (player.current_ability / 100)


def _select_by_weight(rng: random.Random, players: list[Player], count: int) -> list[Player]:
    """Weighted sampling without replacement, one draw per pick."""
    remaining = list(players)
    selected: list[Player] = []
    for _ in range(min(count, len(remaining))):
        weights = [max(0.1, _composite(p)) for p in remaining]
        picked = rng.choices(remaining, weights=weights)[0]
        selected.append(picked)
        remaining.remove(picked)
    return selected


def _shuffled(rng: random.Random, players: list[Player]) -> list[Player]:
    return rng.sample(players, len(players))


def _select_highlights(
    rng: random.Random,
    focus: AnalystFocus,
    players: list[Player],
    count: int,
) -> list[Player]:
    if focus == AnalystFocus.YOUTH:
        youth = [p for p in players if p.age < 21]
        if youth:
            return _shuffled(rng, youth)[:count]
        return _select_by_weight(rng, players, count)

    if focus == AnalystFocus.UNDERVALUED:
        by_headroom = sorted(
            players,
            key=lambda p: p.potential_ability / max(1, p.current_ability),
            reverse=True,
        )
        return _shuffled(rng, by_headroom[:count * 3])[:count]

    if focus == AnalystFocus.FORM_PLAYERS:
        streaky = [p for p in players if abs(p.form) > 1]
        if streaky:
            return _shuffled(rng, streaky)[:count]
        return _select_by_weight(rng, players, count)

    return _select_by_weight(rng, players, count)


# =============================================================================
# Operations
# =============================================================================

def generate_analyst_candidate(
    rng: random.Random,
    season: int = 1,
    id_seed: Optional[str] = None,
) -> DataAnalyst:
    """
    Generate a hireable analyst.

    Skill is drawn from N(8, 3) and clamped to 1-20; salary scales with it.
    """
    skill = int(clamp(round_half_up(rng.gauss(8, 3)), 1, 20))
    focus = rng.choice(list(AnalystFocus))
    name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
    seed = id_seed if id_seed is not None else uuid4().hex[:8]

    return DataAnalyst(
        id=f"analyst_{season}_{seed}",
        name=name,
        skill=skill,
        focus=focus,
        weekly_salary=BASE_SALARY + skill * SALARY_PER_SKILL,
    )


def generate_analyst_report(
    rng: random.Random,
    analyst: DataAnalyst,
    league: League,
    players: Mapping[str, Player],
    season: int,
    week: int,
    report_id: Optional[str] = None,
) -> AnalystReport:
    """
    Produce an analyst's weekly league report.

    Quality is skill * 4 plus N(0, 5) noise, scaled by 0.5 + morale/200.
    Highlight count grows with quality (1-5). Each league player has a
    skill/20 chance of being flagged, capped at max(1, quality // 30) flags.

    Args:
        rng: Session RNG
        analyst: The reporting analyst
        league: League the analyst watches
        players: Every known player, keyed by id
        season: Current season
        week: Current week
        report_id: Optional explicit id

    Returns:
        AnalystReport; empty highlights and anomalies for an empty league
    """
    if report_id is None:
        report_id = f"analyst_report_{analyst.id}_s{season}w{week}"

    raw_quality = analyst.skill * 4 + rng.gauss(0, 5)
    morale_multiplier = 0.5 + analyst.morale / 200
    quality = int(clamp(round_half_up(raw_quality * morale_multiplier), 0, 100))

    league_players = [p for p in players.values() if league.contains(p)]
    report = AnalystReport(
        id=report_id,
        analyst_id=analyst.id,
        league_id=league.id,
        quality=quality,
        week=week,
        season=season,
    )
    if not league_players:
        logger.debug("Analyst %s has no players to watch in %s", analyst.id, league.id)
        return report

    highlight_count = int(clamp(1 + quality // 25, 1, MAX_HIGHLIGHTS))
    highlighted = _select_highlights(rng, analyst.focus, league_players, highlight_count)

    anomalies: list[AnomalyFlag] = []
    anomaly_chance = analyst.skill / 20
    anomaly_cap = max(1, quality // 30)

    for player in _shuffled(rng, league_players):
        if rng.random() >= anomaly_chance:
            continue

        if player.form >= 0:
            direction = AnomalyDirection.POSITIVE
            stat = Stat.GOALS
            description = (
                f"{player.full_name} is significantly outperforming statistical "
                f"expectations this period."
            )
        else:
            direction = AnomalyDirection.NEGATIVE
            stat = Stat.PASS_COMPLETION
            description = (
                f"{player.full_name} is showing a concerning statistical dip "
                f"relative to league peers."
            )

        severity = round_half_up((abs(player.form) * 0.8 + rng.uniform(0.2, 1.0)) * 10) / 10
        anomalies.append(AnomalyFlag(
            id=f"anomaly_{report_id}_{player.id}",
            player_id=player.id,
            stat=stat,
            direction=direction,
            severity=clamp(severity, 0.5, 4.0),
            description=description,
            week=week,
            season=season,
        ))
        if len(anomalies) >= anomaly_cap:
            break

    report.highlights = [p.id for p in highlighted]
    report.anomalies = anomalies
    return report


def update_analyst_morale(
    analyst: DataAnalyst,
    had_meeting: bool = False,
    report_used: bool = False,
    report_ignored: bool = False,
) -> DataAnalyst:
    """Apply a week of morale change: -1 decay, +5 meeting, +3 used, -5 ignored."""
    delta = -1
    if had_meeting:
        delta += 5
    if report_used:
        delta += 3
    if report_ignored:
        delta -= 5
    return replace(analyst, morale=int(clamp(analyst.morale + delta, 0, 100)))


def get_analyst_salary_cost(analysts: list[DataAnalyst]) -> int:
    """Total weekly wage bill for the department."""
    return sum(a.weekly_salary for a in analysts)
