"""
Statistical profiling.

Data-side scouting: database queries, deep video analysis and weekly
stats briefings. Per-90 numbers are derived from true attributes with
fixed blends, then blurred by noise that shrinks with the scout's data
literacy. Percentiles rank a player's underlying output against
same-position peers.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from statistics import fmean, pstdev
from typing import Mapping, Optional

from talentscout.core.enums import Position
from talentscout.core.models.player import League, Player
from talentscout.core.models.scout import Scout
from talentscout.core.numeric import clamp, round_half_up

logger = logging.getLogger(__name__)


class Stat(str, Enum):
    """Per-90 statistics tracked in a profile."""

    GOALS = "goals"
    ASSISTS = "assists"
    PASS_COMPLETION = "pass_completion"  # 0-1 rate
    TACKLES_WON = "tackles_won"
    INTERCEPTIONS = "interceptions"
    AERIAL_DUELS_WON = "aerial_duels_won"
    DRIBBLE_SUCCESS = "dribble_success"  # 0-1 rate
    SHOTS_ON_TARGET = "shots_on_target"


class Trend(str, Enum):
    RISING = "rising"
    STABLE = "stable"
    FALLING = "falling"


class AnomalyDirection(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


RATE_STATS = {Stat.PASS_COMPLETION, Stat.DRIBBLE_SUCCESS}

TREND_STATS = [
    Stat.GOALS,
    Stat.ASSISTS,
    Stat.PASS_COMPLETION,
    Stat.TACKLES_WON,
    Stat.INTERCEPTIONS,
]

# Position -> stat -> raw per-90 values of every peer at that position
PeerMap = dict[Position, dict[Stat, list[float]]]


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class StatisticalProfile:
    """A scout's noisy statistical picture of one player for one season."""

    player_id: str
    season: int
    per_90: dict[Stat, float] = field(default_factory=dict)
    percentiles: dict[Stat, int] = field(default_factory=dict)
    trends: dict[Stat, Trend] = field(default_factory=dict)
    last_updated_week: int = 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "player_id": self.player_id,
            "season": self.season,
            "per_90": {s.value: v for s, v in self.per_90.items()},
            "percentiles": {s.value: v for s, v in self.percentiles.items()},
            "trends": {s.value: t.value for s, t in self.trends.items()},
            "last_updated_week": self.last_updated_week,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StatisticalProfile":
        """Create from dictionary."""
        return cls(
            player_id=data["player_id"],
            season=data["season"],
            per_90={Stat(k): v for k, v in data.get("per_90", {}).items()},
            percentiles={Stat(k): v for k, v in data.get("percentiles", {}).items()},
            trends={Stat(k): Trend(v) for k, v in data.get("trends", {}).items()},
            last_updated_week=data.get("last_updated_week", 1),
        )


@dataclass
class AnomalyFlag:
    """A statistical outlier worth a closer look."""

    id: str
    player_id: str
    stat: Stat
    direction: AnomalyDirection
    severity: float  # Perceived z-score, one decimal
    description: str
    week: int
    season: int
    investigated: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "player_id": self.player_id,
            "stat": self.stat.value,
            "direction": self.direction.value,
            "severity": self.severity,
            "description": self.description,
            "week": self.week,
            "season": self.season,
            "investigated": self.investigated,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnomalyFlag":
        return cls(
            id=data["id"],
            player_id=data["player_id"],
            stat=Stat(data["stat"]),
            direction=AnomalyDirection(data["direction"]),
            severity=data["severity"],
            description=data.get("description", ""),
            week=data["week"],
            season=data["season"],
            investigated=data.get("investigated", False),
        )


@dataclass
class DatabaseQueryFilters:
    """Optional filters for a database query."""

    position: Optional[Position] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    min_ca: Optional[int] = None
    anomalies_only: bool = False  # Only players in extreme form (|form| >= 2)

    def matches(self, player: Player) -> bool:
        if self.position is not None and player.position != self.position:
            return False
        if self.min_age is not None and player.age < self.min_age:
            return False
        if self.max_age is not None and player.age > self.max_age:
            return False
        if self.min_ca is not None and player.current_ability < self.min_ca:
            return False
        if self.anomalies_only and abs(player.form) < 2:
            return False
        return True


@dataclass
class DatabaseQueryResult:
    player_ids: list[str] = field(default_factory=list)
    profiles: list[StatisticalProfile] = field(default_factory=list)


@dataclass
class StatsBriefing:
    """Output of a weekly stats briefing."""

    highlights: list[str] = field(default_factory=list)
    anomalies: list[AnomalyFlag] = field(default_factory=list)
    top_performers: list[str] = field(default_factory=list)


# =============================================================================
# Helpers
# =============================================================================

def noise_factor_for_skill(skill: int) -> float:
    """Relative standard deviation of per-90 noise for a data literacy level."""
    if skill <= 7:
        return 0.15
    if skill <= 14:
        return 0.08
    return 0.03


def apply_noise(rng: random.Random, base: float, noise_factor: float) -> float:
    """Multiplicative Gaussian noise, floored at zero."""
    return max(0.0, base * (1 + rng.gauss(0, noise_factor)))


def compute_percentile(value: float, peer_values: list[float]) -> int:
    """Share of peers strictly below value, 0-100. No peers reads as 50."""
    if not peer_values:
        return 50
    below = sum(1 for v in peer_values if v < value)
    return round_half_up(below / len(peer_values) * 100)


def derive_trend(rng: random.Random, form: int) -> Trend:
    """Roll a trend label, biased by current form."""
    rising = clamp(0.33 + form * 0.1, 0.05, 0.75)
    falling = clamp(0.33 - form * 0.1, 0.05, 0.75)
    roll = rng.random()
    if roll < rising:
        return Trend.RISING
    if roll < rising + falling:
        return Trend.FALLING
    return Trend.STABLE


def derive_raw_per_90(player: Player) -> dict[Stat, float]:
    """Noise-free per-90 output implied by a player's true attributes."""
    a = player.attributes
    return {
        Stat.GOALS: (
            (a["shooting"] * 0.5 + a["composure"] * 0.25 + a["positioning"] * 0.25) / 20 * 0.8
        ),
        Stat.ASSISTS: (
            (a["passing"] * 0.45 + a["crossing"] * 0.3 + a["decision_making"] * 0.25) / 20 * 0.5
        ),
        Stat.PASS_COMPLETION: clamp(
            (a["passing"] * 0.6 + a["first_touch"] * 0.4) / 20, 0.0, 1.0
        ),
        Stat.TACKLES_WON: (
            (a["defensive_awareness"] * 0.6 + a["strength"] * 0.4) / 20 * 3.5
        ),
        Stat.INTERCEPTIONS: (
            (a["defensive_awareness"] * 0.5 + a["pressing"] * 0.3 + a["positioning"] * 0.2)
            / 20 * 2.0
        ),
        Stat.AERIAL_DUELS_WON: (
            (a["heading"] * 0.55 + a["strength"] * 0.35 + a["stamina"] * 0.1) / 20 * 3.0
        ),
        Stat.DRIBBLE_SUCCESS: clamp(
            (a["dribbling"] * 0.55 + a["agility"] * 0.3 + a["pace"] * 0.15) / 20, 0.0, 1.0
        ),
        Stat.SHOTS_ON_TARGET: (a["shooting"] * 0.6 + a["composure"] * 0.4) / 20 * 1.5,
    }


def composite_score(raw: Mapping[Stat, float]) -> float:
    """Single all-round output number used to rank top performers."""
    return (
        raw[Stat.GOALS] * 3
        + raw[Stat.ASSISTS] * 2
        + raw[Stat.TACKLES_WON] * 0.5
        + raw[Stat.INTERCEPTIONS] * 0.5
        + raw[Stat.PASS_COMPLETION] * 2
    )


def build_peer_map(players: list[Player]) -> PeerMap:
    """Group raw per-90 values by position."""
    peer_map: PeerMap = {}
    for player in players:
        raw = derive_raw_per_90(player)
        by_stat = peer_map.setdefault(player.position, {stat: [] for stat in Stat})
        for stat, value in raw.items():
            by_stat[stat].append(value)
    return peer_map


def build_profile(
    rng: random.Random,
    player: Player,
    noise_factor: float,
    peer_map: PeerMap,
    season: int,
    week: int,
) -> StatisticalProfile:
    """
    Build one player's profile.

    Draws one Gaussian per stat (in Stat order), then one roll per trend.
    """
    raw = derive_raw_per_90(player)

    per_90: dict[Stat, float] = {}
    for stat in Stat:
        value = apply_noise(rng, raw[stat], noise_factor)
        if stat in RATE_STATS:
            value = clamp(value, 0.0, 1.0)
        per_90[stat] = value

    peers = peer_map.get(player.position, {})
    percentiles = {stat: compute_percentile(raw[stat], peers.get(stat, [])) for stat in Stat}

    trends = {stat: derive_trend(rng, player.form) for stat in TREND_STATS}

    return StatisticalProfile(
        player_id=player.id,
        season=season,
        per_90=per_90,
        percentiles=percentiles,
        trends=trends,
        last_updated_week=week,
    )


def _result_count_range(skill: int) -> tuple[int, int]:
    if skill <= 7:
        return 3, 5
    if skill <= 14:
        return 5, 10
    return 8, 15


def _league_players(league: League, players: Mapping[str, Player]) -> list[Player]:
    return [p for p in players.values() if league.contains(p)]


# =============================================================================
# Activities
# =============================================================================

def execute_database_query(
    rng: random.Random,
    scout: Scout,
    league: League,
    players: Mapping[str, Player],
    filters: DatabaseQueryFilters,
    season: int,
    week: int,
) -> DatabaseQueryResult:
    """
    Query the statistical database for league players matching filters.

    Better data literacy returns more players with less noise:
      - 1-7:   3-5 players, 15% noise
      - 8-14:  5-10 players, 8% noise
      - 15-20: 8-15 players, 3% noise

    Percentiles are ranked against every league player at the position.
    """
    skill = scout.data_literacy
    noise_factor = noise_factor_for_skill(skill)

    league_players = _league_players(league, players)
    candidates = [p for p in league_players if filters.matches(p)]
    if not candidates:
        return DatabaseQueryResult()

    shuffled = rng.sample(candidates, len(candidates))
    min_count, max_count = _result_count_range(skill)
    count = int(clamp(rng.randint(min_count, max_count), 0, len(shuffled)))
    selected = shuffled[:count]

    peer_map = build_peer_map(league_players)
    profiles = [build_profile(rng, p, noise_factor, peer_map, season, week) for p in selected]

    logger.debug("Database query in %s returned %d of %d", league.name, count, len(candidates))
    return DatabaseQueryResult(player_ids=[p.id for p in selected], profiles=profiles)


def execute_deep_video_analysis(
    rng: random.Random,
    scout: Scout,
    player: Player,
    season: int,
    week: int,
    existing_profile: Optional[StatisticalProfile] = None,
    peers: Optional[list[Player]] = None,
) -> StatisticalProfile:
    """
    Build a detailed profile of a single player from video.

    With a prior profile the analysis converges: noise is cut to 60% and
    the new per-90 numbers are blended 60/40 with the old ones. Without
    peers, the player is ranked against themselves alone.
    """
    noise_factor = noise_factor_for_skill(scout.data_literacy)
    if existing_profile is not None:
        noise_factor *= 0.6

    peer_map = build_peer_map(peers if peers else [player])
    profile = build_profile(rng, player, noise_factor, peer_map, season, week)

    if existing_profile is None:
        return profile

    blended = {
        stat: value * 0.6 + existing_profile.per_90.get(stat, value) * 0.4
        for stat, value in profile.per_90.items()
    }
    return replace(profile, per_90=blended)


def generate_stats_briefing(
    rng: random.Random,
    scout: Scout,
    league: League,
    players: Mapping[str, Player],
    season: int,
    week: int,
) -> StatsBriefing:
    """
    Weekly stats briefing for a monitored league.

    Flags up to 2-4 goal-output anomalies against positional peers and
    lists the top 3-5 composite performers. Low data literacy both raises
    the detection threshold and blurs the perceived z-score, so subtle
    outliers slip through.
    """
    skill = scout.data_literacy
    threshold = 2.5 - skill / 20 * 1.5
    noise_factor = noise_factor_for_skill(skill)

    league_players = _league_players(league, players)
    if not league_players:
        return StatsBriefing()

    raw_by_player = {p.id: derive_raw_per_90(p) for p in league_players}
    goals_by_position: dict[Position, list[float]] = {}
    for player in league_players:
        goals_by_position.setdefault(player.position, []).append(
            raw_by_player[player.id][Stat.GOALS]
        )
    position_stats = {
        position: (fmean(values), pstdev(values))
        for position, values in goals_by_position.items()
    }

    anomalies: list[AnomalyFlag] = []
    anomaly_count = rng.randint(2, 4)
    for player in rng.sample(league_players, len(league_players)):
        if len(anomalies) >= anomaly_count:
            break
        mean, std = position_stats[player.position]
        if std == 0:
            continue

        z_score = (raw_by_player[player.id][Stat.GOALS] - mean) / std
        perceived_z = apply_noise(rng, abs(z_score), noise_factor)
        if perceived_z < threshold:
            continue

        if z_score > 0:
            direction = AnomalyDirection.POSITIVE
            description = (
                f"{player.full_name} is outperforming positional peers by "
                f"{perceived_z:.1f} standard deviations in goal output."
            )
        else:
            direction = AnomalyDirection.NEGATIVE
            description = (
                f"{player.full_name} is significantly underperforming positional peers "
                f"({perceived_z:.1f} std below average)."
            )
        anomalies.append(AnomalyFlag(
            id=f"anomaly_{player.id}_{season}_{week}",
            player_id=player.id,
            stat=Stat.GOALS,
            direction=direction,
            severity=round_half_up(perceived_z * 10) / 10,
            description=description,
            week=week,
            season=season,
        ))
        logger.debug("Anomaly flagged: %s z=%.2f", player.id, perceived_z)

    ranked = sorted(
        league_players,
        key=lambda p: composite_score(raw_by_player[p.id]),
        reverse=True,
    )
    top_count = rng.randint(3, 5)
    top_performers = [p.id for p in ranked[:top_count]]

    highlights = [
        f"{league.name} stats briefing for week {week}: {len(league_players)} players analysed."
    ]
    if top_performers:
        leader = ranked[0]
        highlights.append(
            f"Top performer: {leader.full_name} leads the composite per-90 ranking."
        )
    if anomalies:
        noun = "anomaly" if len(anomalies) == 1 else "anomalies"
        highlights.append(f"{len(anomalies)} statistical {noun} flagged for investigation.")

    in_form = [p for p in league_players if p.form >= 2]
    if in_form:
        sample = rng.choice(in_form)
        highlights.append(
            f"{sample.full_name} is in exceptional form, metrics trending sharply upward."
        )

    return StatsBriefing(highlights=highlights, anomalies=anomalies, top_performers=top_performers)
