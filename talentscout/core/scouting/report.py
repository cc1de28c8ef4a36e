"""
Scouting reports: assembly and quality scoring.

A report is drafted from every observation the scout has of a player,
edited by the scout, finalized, and only later scored by the engine
against the player's true attributes. The scout never sees the real
quality score while writing; estimate_report_quality() is the only
preview available, and it uses nothing the scout could not know.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional

from talentscout.core.attributes import AttributeDomain, AttributeRegistry
from talentscout.core.config import get_config
from talentscout.core.enums import Position
from talentscout.core.models.observation import Observation
from talentscout.core.models.player import Player
from talentscout.core.models.scout import Scout
from talentscout.core.numeric import clamp, mean, round_half_up, round_to_half
from talentscout.core.scouting.profiling import StatisticalProfile
from talentscout.core.scouting.stars import MAX_STARS, stars_to_ability

logger = logging.getLogger(__name__)


class ConvictionLevel(str, Enum):
    """How hard the scout is pushing the player, weakest first."""

    NOTE = "note"
    RECOMMEND = "recommend"
    STRONG_RECOMMEND = "strong_recommend"
    TABLE_POUND = "table_pound"

    @property
    def rank(self) -> int:
        return CONVICTION_ORDER.index(self)


CONVICTION_ORDER = [
    ConvictionLevel.NOTE,
    ConvictionLevel.RECOMMEND,
    ConvictionLevel.STRONG_RECOMMEND,
    ConvictionLevel.TABLE_POUND,
]


class ComparisonBucket(str, Enum):
    TECHNICAL = "technical"
    PHYSICAL = "physical"
    BALANCED = "balanced"
    YOUTH = "youth"


# =============================================================================
# Baselines and Text
# =============================================================================

# Typical values at each position; unlisted attributes baseline at 10
POSITION_BASELINES: dict[Position, dict[str, int]] = {
    Position.GK: {
        "composure": 12, "positioning": 13, "decision_making": 12, "leadership": 11,
        "strength": 10, "pace": 8, "anticipation": 13, "balance": 10, "jumping": 9,
    },
    Position.CB: {
        "heading": 13, "strength": 12, "positioning": 13, "decision_making": 12,
        "composure": 11, "leadership": 11, "passing": 10, "defensive_awareness": 14,
        "pressing": 10, "tackling": 13, "jumping": 12, "marking": 13,
        "anticipation": 12, "teamwork": 12,
    },
    Position.LB: {
        "crossing": 12, "pace": 13, "stamina": 13, "agility": 12, "work_rate": 12,
        "defensive_awareness": 12, "pressing": 11, "tackling": 11, "balance": 11,
        "marking": 11, "teamwork": 12, "anticipation": 10,
    },
    Position.RB: {
        "crossing": 12, "pace": 13, "stamina": 13, "agility": 12, "work_rate": 12,
        "defensive_awareness": 12, "pressing": 11, "tackling": 11, "balance": 11,
        "marking": 11, "teamwork": 12, "anticipation": 10,
    },
    Position.CDM: {
        "strength": 12, "passing": 12, "decision_making": 12, "stamina": 13,
        "work_rate": 13, "defensive_awareness": 13, "pressing": 13, "tackling": 13,
        "marking": 12, "anticipation": 12, "teamwork": 13, "vision": 11,
    },
    Position.CM: {
        "passing": 13, "decision_making": 12, "stamina": 13, "first_touch": 12,
        "work_rate": 12, "off_the_ball": 11, "pressing": 11, "vision": 12,
        "teamwork": 12, "anticipation": 11, "balance": 11,
    },
    Position.CAM: {
        "passing": 13, "first_touch": 13, "dribbling": 12, "decision_making": 12,
        "composure": 12, "off_the_ball": 13, "shooting": 11, "vision": 14,
        "finishing": 11, "balance": 11, "anticipation": 11,
    },
    Position.LW: {
        "dribbling": 13, "crossing": 13, "pace": 14, "agility": 13, "first_touch": 12,
        "shooting": 11, "off_the_ball": 12, "finishing": 12, "balance": 12,
    },
    Position.RW: {
        "dribbling": 13, "crossing": 13, "pace": 14, "agility": 13, "first_touch": 12,
        "shooting": 11, "off_the_ball": 12, "finishing": 12, "balance": 12,
    },
    Position.ST: {
        "shooting": 14, "composure": 13, "positioning": 13, "heading": 12,
        "first_touch": 12, "strength": 12, "pace": 12, "decision_making": 12,
        "off_the_ball": 13, "finishing": 14, "jumping": 11, "balance": 11,
        "anticipation": 12,
    },
}

DEFAULT_BASELINE = 10
STANDOUT_MARGIN = 3  # Points above/below baseline to call a strength/weakness

STRENGTH_DESCRIPTORS: dict[str, str] = {
    "first_touch": "Kills the ball dead on the first touch, even under pressure",
    "passing": "Tidy, reliable distributor who keeps the ball moving",
    "dribbling": "Carries the ball with confidence and beats players one against one",
    "crossing": "Whips in dangerous crosses from wide areas",
    "shooting": "Clean striker of the ball who tests goalkeepers from range",
    "heading": "Attacks headers with real conviction",
    "tackling": "Well-timed tackler who wins the ball cleanly",
    "finishing": "Cool finisher when chances fall in the box",
    "pace": "Genuine pace that stretches defences",
    "strength": "Physically robust, holds off challenges with ease",
    "stamina": "Covers every blade of grass for the full ninety",
    "agility": "Sharp and elusive when changing direction",
    "jumping": "Big leap that wins aerial contests",
    "balance": "Very hard to knock off the ball",
    "composure": "Unflustered under pressure, plays the same in big moments",
    "positioning": "Always seems to be in the right place",
    "work_rate": "Relentless, presses and tracks back without being told",
    "decision_making": "Consistently picks the right option",
    "leadership": "Organises and lifts the players around them",
    "anticipation": "Reads the play a step ahead of everyone else",
    "vision": "Sees passes that others simply do not",
    "off_the_ball": "Clever movement, constantly finds pockets of space",
    "pressing": "Presses with intelligence and forces turnovers high up",
    "defensive_awareness": "Senses danger early and snuffs it out",
    "marking": "Sticks tight to an assigned opponent",
    "teamwork": "Disciplined team player who holds the shape",
}

WEAKNESS_DESCRIPTORS: dict[str, str] = {
    "first_touch": "Heavy first touch invites pressure",
    "passing": "Gives the ball away too cheaply under pressure",
    "dribbling": "Rarely beats a player, loses the ball in tight areas",
    "crossing": "Delivery from wide is erratic",
    "shooting": "Wasteful when shooting from distance",
    "heading": "Avoids aerial contests where possible",
    "tackling": "Mistimes challenges and concedes fouls",
    "finishing": "Snatches at chances in the box",
    "pace": "Lacks the pace to recover once beaten",
    "strength": "Easily muscled off the ball",
    "stamina": "Fades badly in the final half hour",
    "agility": "Stiff when asked to turn quickly",
    "jumping": "Limited leap, loses most aerial duels",
    "balance": "Goes down too easily under contact",
    "composure": "Snatches at things when put under pressure",
    "positioning": "Drifts out of position and leaves gaps",
    "work_rate": "Effort without the ball comes and goes",
    "decision_making": "Too often chooses the wrong option",
    "leadership": "Goes quiet when the team needs a voice",
    "anticipation": "Reacts late to what is happening around them",
    "vision": "Plays the safe pass and misses runners",
    "off_the_ball": "Static without the ball, easy to track",
    "pressing": "Passive out of possession",
    "defensive_awareness": "Caught out by simple runs in behind",
    "marking": "Loses an assigned runner too easily",
    "teamwork": "Individualistic, drifts from the game plan",
}

COMPARISON_TEMPLATES: dict[ComparisonBucket, list[str]] = {
    ComparisonBucket.TECHNICAL: [
        "A ball-playing technician in the classic playmaker mould",
        "Everything is done with craft and purpose on the ball",
    ],
    ComparisonBucket.PHYSICAL: [
        "An athlete first: the physical profile jumps off the page",
        "Fits the modern high-intensity mould, built on pace and power",
    ],
    ComparisonBucket.BALANCED: [
        "Well-rounded profile with no glaring hole, fits most systems",
        "More of a completer than a headliner, valuable to a coach who sees the whole picture",
    ],
    ComparisonBucket.YOUTH: [
        "Raw, but the underlying tools are there for a coach to work with",
        "Needs time and the right environment; the ceiling is intriguing",
    ],
}

TECHNICAL_MARKERS = ["first_touch", "dribbling", "passing"]
PHYSICAL_MARKERS = ["pace", "strength", "stamina", "agility"]

BASE_RELEVANT_ATTRIBUTES = ["decision_making", "positioning", "composure", "work_rate"]

POSITION_RELEVANT_ATTRIBUTES: dict[Position, list[str]] = {
    Position.GK: ["positioning", "composure", "decision_making", "leadership"],
    Position.CB: ["heading", "strength", "passing", "defensive_awareness"],
    Position.LB: ["crossing", "pace", "stamina", "defensive_awareness", "pressing"],
    Position.RB: ["crossing", "pace", "stamina", "defensive_awareness", "pressing"],
    Position.CDM: ["strength", "passing", "stamina", "defensive_awareness", "pressing"],
    Position.CM: ["passing", "stamina", "first_touch", "off_the_ball", "pressing"],
    Position.CAM: ["passing", "first_touch", "dribbling", "shooting", "off_the_ball"],
    Position.LW: ["dribbling", "crossing", "pace", "agility", "shooting", "off_the_ball"],
    Position.RW: ["dribbling", "crossing", "pace", "agility", "shooting", "off_the_ball"],
    Position.ST: ["shooting", "composure", "heading", "first_touch", "strength", "off_the_ball"],
}

# Weights of the authoritative quality score
ACCURACY_WEIGHT = 0.45
COVERAGE_WEIGHT = 0.25
CONVICTION_WEIGHT = 0.20
TIGHTNESS_WEIGHT = 0.10
PERSONALITY_TRAIT_BONUS = 5

HIGHLIGHT_PERCENTILE = 80
QUALITY_HINT_THRESHOLD = 70


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class AttributeAssessment:
    """A merged estimate of one attribute across every reading."""

    attribute: str
    estimated_value: int  # 1-20
    confidence_range: tuple[int, int]
    domain: AttributeDomain
    observation_count: int = 0  # Readings merged into this estimate

    @property
    def range_width(self) -> int:
        low, high = self.confidence_range
        return high - low

    def contains(self, value: int) -> bool:
        low, high = self.confidence_range
        return low <= value <= high

    def to_dict(self) -> dict:
        return {
            "attribute": self.attribute,
            "estimated_value": self.estimated_value,
            "confidence_range": list(self.confidence_range),
            "domain": self.domain.value,
            "observation_count": self.observation_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttributeAssessment":
        low, high = data["confidence_range"]
        return cls(
            attribute=data["attribute"],
            estimated_value=data["estimated_value"],
            confidence_range=(low, high),
            domain=AttributeDomain(data["domain"]),
            observation_count=data.get("observation_count", 0),
        )


@dataclass
class ReportDraft:
    """Machine-generated content the scout edits before submitting."""

    attribute_assessments: list[AttributeAssessment] = field(default_factory=list)
    suggested_strengths: list[str] = field(default_factory=list)
    suggested_weaknesses: list[str] = field(default_factory=list)
    comparison_suggestions: list[str] = field(default_factory=list)
    estimated_value: int = 0
    perceived_ca_stars: Optional[float] = None
    perceived_pa_range: Optional[tuple[float, float]] = None
    statistical_highlights: list[str] = field(default_factory=list)


@dataclass
class ScoutReport:
    """A submitted report. quality_score stays 0 until the engine scores it."""

    id: str
    player_id: str
    scout_id: str
    submitted_week: int
    submitted_season: int
    attribute_assessments: list[AttributeAssessment] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    conviction: ConvictionLevel = ConvictionLevel.NOTE
    summary: str = ""
    estimated_value: int = 0
    quality_score: int = 0
    perceived_ca_stars: Optional[float] = None
    perceived_pa_range: Optional[tuple[float, float]] = None
    statistical_highlights: list[str] = field(default_factory=list)

    def get_assessment(self, attribute: str) -> Optional[AttributeAssessment]:
        for assessment in self.attribute_assessments:
            if assessment.attribute == attribute:
                return assessment
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "player_id": self.player_id,
            "scout_id": self.scout_id,
            "submitted_week": self.submitted_week,
            "submitted_season": self.submitted_season,
            "attribute_assessments": [a.to_dict() for a in self.attribute_assessments],
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "conviction": self.conviction.value,
            "summary": self.summary,
            "estimated_value": self.estimated_value,
            "quality_score": self.quality_score,
            "perceived_ca_stars": self.perceived_ca_stars,
            "perceived_pa_range": list(self.perceived_pa_range) if self.perceived_pa_range else None,
            "statistical_highlights": list(self.statistical_highlights),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScoutReport":
        """Create from dictionary."""
        pa_range = data.get("perceived_pa_range")
        return cls(
            id=data["id"],
            player_id=data["player_id"],
            scout_id=data["scout_id"],
            submitted_week=data["submitted_week"],
            submitted_season=data["submitted_season"],
            attribute_assessments=[
                AttributeAssessment.from_dict(a) for a in data.get("attribute_assessments", [])
            ],
            strengths=list(data.get("strengths", [])),
            weaknesses=list(data.get("weaknesses", [])),
            conviction=ConvictionLevel(data.get("conviction", "note")),
            summary=data.get("summary", ""),
            estimated_value=data.get("estimated_value", 0),
            quality_score=data.get("quality_score", 0),
            perceived_ca_stars=data.get("perceived_ca_stars"),
            perceived_pa_range=tuple(pa_range) if pa_range else None,
            statistical_highlights=list(data.get("statistical_highlights", [])),
        )


@dataclass
class QualityBreakdown:
    """Sub-scores of the pre-submission quality preview."""

    observation_depth: int = 0  # 0-25
    confidence_level: int = 0  # 0-20
    conviction_fit: int = 0  # 0-15
    detail: int = 0  # 0-20
    scout_skill: int = 0  # 0-20

    @property
    def total(self) -> int:
        return (
            self.observation_depth
            + self.confidence_level
            + self.conviction_fit
            + self.detail
            + self.scout_skill
        )


@dataclass
class QualityEstimate:
    score: int
    breakdown: QualityBreakdown
    hints: list[str] = field(default_factory=list)


# =============================================================================
# Helpers
# =============================================================================

def get_relevant_attributes(position: Position) -> list[str]:
    """Attributes a report on this position is expected to cover."""
    combined = BASE_RELEVANT_ATTRIBUTES + POSITION_RELEVANT_ATTRIBUTES.get(position, [])
    return list(dict.fromkeys(combined))


def range_half_width(observation_count: int) -> int:
    """Half-width of a reading's range: 3 for a single look, 1 from seven on."""
    return round_half_up(max(1.0, 4 - math.sqrt(observation_count)))


def expected_conviction(ability: float) -> ConvictionLevel:
    """The conviction a player of this ability deserves."""
    if ability >= 165:
        return ConvictionLevel.TABLE_POUND
    if ability >= 140:
        return ConvictionLevel.STRONG_RECOMMEND
    if ability >= 110:
        return ConvictionLevel.RECOMMEND
    return ConvictionLevel.NOTE


def conviction_gap(conviction: ConvictionLevel, ability: float) -> int:
    return abs(conviction.rank - expected_conviction(ability).rank)


def merge_readings(observations: list[Observation]) -> list[AttributeAssessment]:
    """
    Merge every attribute reading into one assessment per attribute.

    Estimates are confidence-weighted means (plain means when every
    confidence is zero). Each reading contributes a range whose half-width
    shrinks with its observation count; the final range averages them.
    """
    grouped: dict[str, list] = {}
    for observation in observations:
        for reading in observation.attribute_readings:
            grouped.setdefault(reading.attribute, []).append(reading)

    assessments = []
    for attribute, readings in grouped.items():
        total_weight = sum(r.confidence for r in readings)
        if total_weight == 0:
            estimate = mean([r.perceived_value for r in readings])
        else:
            estimate = sum(r.perceived_value * r.confidence for r in readings) / total_weight

        lows, highs = [], []
        for reading in readings:
            half = range_half_width(reading.observation_count)
            lows.append(reading.perceived_value - half)
            highs.append(reading.perceived_value + half)

        assessments.append(AttributeAssessment(
            attribute=attribute,
            estimated_value=int(clamp(round_half_up(estimate), 1, 20)),
            confidence_range=(
                int(clamp(round_half_up(mean(lows)), 1, 20)),
                int(clamp(round_half_up(mean(highs)), 1, 20)),
            ),
            domain=AttributeRegistry.domain_of(attribute),
            observation_count=len(readings),
        ))
    return assessments


def identify_strengths(
    assessments: list[AttributeAssessment],
    position: Position,
) -> list[str]:
    baselines = POSITION_BASELINES.get(position, {})
    strengths = []
    for assessment in assessments:
        baseline = baselines.get(assessment.attribute, DEFAULT_BASELINE)
        descriptor = STRENGTH_DESCRIPTORS.get(assessment.attribute)
        if descriptor and assessment.estimated_value >= baseline + STANDOUT_MARGIN:
            strengths.append(descriptor)
    return strengths


def identify_weaknesses(
    assessments: list[AttributeAssessment],
    position: Position,
) -> list[str]:
    baselines = POSITION_BASELINES.get(position, {})
    weaknesses = []
    for assessment in assessments:
        baseline = baselines.get(assessment.attribute, DEFAULT_BASELINE)
        descriptor = WEAKNESS_DESCRIPTORS.get(assessment.attribute)
        if descriptor and assessment.estimated_value <= baseline - STANDOUT_MARGIN:
            weaknesses.append(descriptor)
    return weaknesses


def _average_for(assessments: list[AttributeAssessment], attributes: list[str]) -> float:
    values = [a.estimated_value for a in assessments if a.attribute in attributes]
    return mean(values) if values else DEFAULT_BASELINE


def comparison_bucket(assessments: list[AttributeAssessment], age: int) -> ComparisonBucket:
    """Pick the narrative bucket; anyone 20 or under is a youth profile."""
    if age <= 20:
        return ComparisonBucket.YOUTH
    technical = _average_for(assessments, TECHNICAL_MARKERS)
    physical = _average_for(assessments, PHYSICAL_MARKERS)
    if technical > physical + 2:
        return ComparisonBucket.TECHNICAL
    if physical > technical + 2:
        return ComparisonBucket.PHYSICAL
    return ComparisonBucket.BALANCED


def estimate_perceived_ca(assessments: list[AttributeAssessment]) -> int:
    """
    Perceived ability on the 1-200 scale from attribute estimates.

    Narrow ranges count for more; an empty report reads as 100.
    """
    if not assessments:
        return 100
    weights = [max(0.1, 1 - a.range_width / 20) for a in assessments]
    weighted = sum(a.estimated_value * w for a, w in zip(assessments, weights)) / sum(weights)
    return round_half_up(weighted * 10)


def report_perceived_ability(report: ScoutReport) -> int:
    """The scout's implied ability for a report: stars if given, else attributes."""
    if report.perceived_ca_stars is not None:
        return stars_to_ability(report.perceived_ca_stars)
    return estimate_perceived_ca(report.attribute_assessments)


def estimate_market_value(
    assessments: list[AttributeAssessment],
    age: int,
    scout: Scout,
) -> int:
    """
    Rough transfer value from perceived quality.

    Exponential in perceived ability (100 is roughly 2M), discounted past
    28 and nudged by the scout's data literacy. Rounded to 50k.
    """
    if not assessments:
        return 0
    config = get_config()
    perceived_ca = estimate_perceived_ca(assessments)
    raw_value = (perceived_ca / 100) ** config.market_value_exponent * config.market_value_base

    age_factor = 1.0 if age <= 28 else max(0.3, 1 - (age - 28) * 0.08)
    literacy_factor = 0.9 + scout.data_literacy / 20 * 0.2

    step = config.market_value_rounding
    return round_half_up(raw_value * age_factor * literacy_factor / step) * step


def _statistical_highlights(profile: StatisticalProfile) -> list[str]:
    highlights = []
    for stat, percentile in profile.percentiles.items():
        if percentile >= HIGHLIGHT_PERCENTILE:
            label = stat.value.replace("_", " ")
            highlights.append(
                f"{label.capitalize()} per 90 ranks in the {percentile}th percentile for the position"
            )
    return highlights


def _average_error(assessments: list[AttributeAssessment], player: Player) -> float:
    return mean([abs(a.estimated_value - player.attributes[a.attribute]) for a in assessments])


def score_range_tightness(assessments: list[AttributeAssessment], player: Player) -> int:
    """
    Reward narrow ranges that hold the truth.

    A hit scores 40-100 and a miss 0-30. The gap between hit and miss is
    widest for narrow ranges, so being precisely wrong costs the most.
    """
    if not assessments:
        return 50
    scores = []
    for assessment in assessments:
        width = assessment.range_width
        if assessment.contains(player.attributes[assessment.attribute]):
            scores.append(max(40, 100 - width * 10))
        else:
            scores.append(max(0, 30 - width * 5))
    return round_half_up(mean(scores))


# =============================================================================
# Operations
# =============================================================================

def generate_report_content(
    player: Player,
    observations: list[Observation],
    scout: Scout,
    profile: Optional[StatisticalProfile] = None,
) -> ReportDraft:
    """
    Draft a report from everything the scout has observed.

    Only public facts about the player (position, age) are read here; the
    hidden attributes never leak into a draft.

    Args:
        player: The player being reported on
        observations: Every observation of this player to merge
        scout: The author
        profile: Optional statistical profile to pull highlights from

    Returns:
        A ReportDraft; empty (value 0) when there are no observations
    """
    if not observations:
        return ReportDraft()

    assessments = merge_readings(observations)
    bucket = comparison_bucket(assessments, player.age)

    draft = ReportDraft(
        attribute_assessments=assessments,
        suggested_strengths=identify_strengths(assessments, player.position),
        suggested_weaknesses=identify_weaknesses(assessments, player.position),
        comparison_suggestions=COMPARISON_TEMPLATES[bucket][:2],
        estimated_value=estimate_market_value(assessments, player.age, scout),
        statistical_highlights=_statistical_highlights(profile) if profile else [],
    )

    recent = [o.ability_reading for o in observations if o.ability_reading is not None][-3:]
    if recent:
        draft.perceived_ca_stars = round_to_half(mean([r.perceived_ca for r in recent]))
        draft.perceived_pa_range = (
            round_to_half(mean([r.perceived_pa_low for r in recent])),
            min(MAX_STARS, round_to_half(mean([r.perceived_pa_high for r in recent]))),
        )

    logger.debug(
        "Drafted report on %s: %d attributes, value %d",
        player.id, len(assessments), draft.estimated_value,
    )
    return draft


def estimate_report_quality(
    *,
    observation_count: int,
    avg_confidence: float,
    conviction: ConvictionLevel,
    strength_count: int,
    weakness_count: int,
    scout_skills: Mapping[object, int],
    assessed_attribute_count: int = 0,
    position: Optional[Position] = None,
    perceived_ca: Optional[float] = None,
) -> QualityEstimate:
    """
    Preview a report's quality before submission.

    Built only from what the scout knows. Sub-scores:
      - observation depth  0-25
      - confidence level   0-20
      - conviction fit     0-15 (10 when no perceived ability is given)
      - detail             0-20
      - scout skill        0-20

    Hints are only offered when the score is below 70.
    """
    obs_factor = min(1.0, observation_count / 5)
    if position is not None:
        relevant = len(get_relevant_attributes(position))
        coverage_factor = min(1.0, assessed_attribute_count / max(1, relevant))
    else:
        coverage_factor = min(1.0, assessed_attribute_count / 8)

    gap = conviction_gap(conviction, perceived_ca) if perceived_ca is not None else None
    skill_values = list(scout_skills.values())

    breakdown = QualityBreakdown(
        observation_depth=round_half_up((obs_factor * 0.5 + coverage_factor * 0.5) * 25),
        confidence_level=round_half_up(avg_confidence * 20),
        conviction_fit=10 if gap is None else round_half_up(max(3, 15 - gap * 4)),
        detail=round_half_up(
            (min(1.0, strength_count / 3) * 0.5 + min(1.0, weakness_count / 2) * 0.5) * 20
        ),
        scout_skill=round_half_up(mean(skill_values) if skill_values else 10),
    )
    score = int(clamp(breakdown.total, 0, 100))

    hints: list[str] = []
    if score < QUALITY_HINT_THRESHOLD:
        if observation_count < 3:
            hints.append("Add more observations to improve depth score")
        if strength_count < 3 or weakness_count < 2:
            hints.append("Include at least 3 strengths and 2 weaknesses")
        if avg_confidence < 0.5:
            hints.append("Observe more matches to increase attribute confidence")
        if gap is not None and gap >= 2:
            hints.append("Match your conviction to the ability you have seen")
        if assessed_attribute_count < 6:
            hints.append("Assess more attributes for better positional coverage")

    return QualityEstimate(score=score, breakdown=breakdown, hints=hints)


def calculate_report_quality(
    report: ScoutReport,
    player: Player,
    bonus: Optional[float] = None,
) -> int:
    """
    Score a submitted report against the player's true values, 0-100.

    Engine-only: reads hidden attributes and ability. Deterministic.

    Args:
        report: The finalized report
        player: The player with true values
        bonus: Additive equipment bonus on a 0-1 scale (0.05 = +5 points)

    Returns:
        Quality score, 0 for a report with no assessments
    """
    assessments = report.attribute_assessments
    if not assessments:
        return 0

    accuracy = max(0.0, 100 - _average_error(assessments, player) * 14)

    relevant = get_relevant_attributes(player.position)
    assessed_relevant = sum(1 for a in assessments if a.attribute in relevant)
    coverage = assessed_relevant / max(1, len(relevant)) * 100

    conviction = max(10, 100 - conviction_gap(report.conviction, player.current_ability) * 30)
    tightness = score_range_tightness(assessments, player)

    quality = (
        accuracy * ACCURACY_WEIGHT
        + coverage * COVERAGE_WEIGHT
        + conviction * CONVICTION_WEIGHT
        + tightness * TIGHTNESS_WEIGHT
    )
    quality += len(player.personality_revealed) * PERSONALITY_TRAIT_BONUS
    quality += (bonus or 0.0) * 100

    return int(clamp(round_half_up(quality), 0, 100))


def finalize_report(
    draft: ReportDraft,
    conviction: ConvictionLevel,
    summary: str,
    selected_strengths: list[str],
    selected_weaknesses: list[str],
    scout: Scout,
    week: int,
    season: int,
    player_id: str,
) -> ScoutReport:
    """Turn an edited draft into a submitted report with a zero quality score."""
    return ScoutReport(
        id=f"report_{scout.id}_{player_id}_s{season}w{week}",
        player_id=player_id,
        scout_id=scout.id,
        submitted_week=week,
        submitted_season=season,
        attribute_assessments=list(draft.attribute_assessments),
        strengths=list(selected_strengths),
        weaknesses=list(selected_weaknesses),
        conviction=conviction,
        summary=summary,
        estimated_value=draft.estimated_value,
        quality_score=0,
        perceived_ca_stars=draft.perceived_ca_stars,
        perceived_pa_range=draft.perceived_pa_range,
        statistical_highlights=list(draft.statistical_highlights),
    )


def score_report(
    report: ScoutReport,
    player: Player,
    bonus: Optional[float] = None,
) -> ScoutReport:
    """Copy of the report with its quality score filled in by the engine."""
    return replace(report, quality_score=calculate_report_quality(report, player, bonus))


def track_post_transfer(
    report: ScoutReport,
    player: Player,
    seasons_since_signing: float,
) -> int:
    """
    Retrospective accuracy once a signing has bedded in, 0-100.

    Discounted toward 0 until three seasons of settled data exist.
    """
    if not report.attribute_assessments:
        return 0
    maturity = min(1.0, seasons_since_signing / 3)
    accuracy = max(0.0, 100 - _average_error(report.attribute_assessments, player) * 12)
    return round_half_up(accuracy * maturity)
