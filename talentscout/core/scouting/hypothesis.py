"""
Hypothesis system.

When a scout sees a player do something notable more than once in a
session, a question may form ("is that first touch really that good?").
Hypotheses collect evidence from later moments in the same domain,
drift between supported and contradicted, and are finally resolved to
confirmed or debunked. Resolved hypotheses are frozen.

Every transform returns a new Hypothesis; inputs are never mutated.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from talentscout.core.attributes import AttributeDomain
from talentscout.core.config import get_config
from talentscout.core.models.observation import MomentType, PlayerMoment

logger = logging.getLogger(__name__)


class HypothesisState(str, Enum):
    """Lifecycle of a hypothesis."""

    OPEN = "open"
    SUPPORTED = "supported"
    CONTRADICTED = "contradicted"
    CONFIRMED = "confirmed"  # Terminal
    DEBUNKED = "debunked"  # Terminal

    @property
    def is_terminal(self) -> bool:
        return self in (HypothesisState.CONFIRMED, HypothesisState.DEBUNKED)


class EvidenceDirection(str, Enum):
    FOR = "for"
    AGAINST = "against"


class EvidenceStrength(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"


class QualityBand(str, Enum):
    """Average moment quality bucket used to pick a template."""

    HIGH = "high"
    MIXED = "mixed"
    LOW = "low"


# =============================================================================
# Thresholds
# =============================================================================

HIGH_QUALITY = 7  # Moment quality at or above: evidence for, "high" band
LOW_QUALITY = 5  # Moment quality below: evidence against, "low" band
STRONG_EVIDENCE = 8
MODERATE_EVIDENCE = 5


# =============================================================================
# Templates
# =============================================================================

TEMPLATES: dict[MomentType, dict[QualityBand, list[str]]] = {
    MomentType.TECHNICAL_ACTION: {
        QualityBand.HIGH: [
            "Is {player}'s technique as refined as it looked today, or was this a purple patch?",
            "Can {player} reproduce that quality on the ball against stronger opposition?",
        ],
        QualityBand.MIXED: [
            "Is {player}'s technical game reliable, or does it come and go?",
        ],
        QualityBand.LOW: [
            "Is there a genuine technical flaw in {player}'s game, or was this an off day?",
            "Will {player}'s touch hold up at a higher level?",
        ],
    },
    MomentType.PHYSICAL_TEST: {
        QualityBand.HIGH: [
            "Is {player}'s physical edge real, or just a mismatch against this opponent?",
            "Does {player} have the engine to keep this up every week?",
        ],
        QualityBand.MIXED: [
            "Is {player}'s physical profile an asset or a liability? The signs point both ways.",
        ],
        QualityBand.LOW: [
            "Is {player} physically ready for senior football?",
            "Was {player} carrying a knock, or is the lack of pace a lasting problem?",
        ],
    },
    MomentType.MENTAL_RESPONSE: {
        QualityBand.HIGH: [
            "Is {player}'s composure a settled trait, or did one good moment flatter them?",
            "Does {player} read the game as well as today suggested?",
        ],
        QualityBand.MIXED: [
            "How does {player} really respond when things go against them?",
        ],
        QualityBand.LOW: [
            "Does {player} go missing when the pressure is on?",
            "Are {player}'s lapses in concentration a pattern?",
        ],
    },
    MomentType.TACTICAL_DECISION: {
        QualityBand.HIGH: [
            "Does {player} understand the system, or did the coach's shape do the work?",
            "Is {player}'s positional intelligence as sharp as it looked?",
        ],
        QualityBand.MIXED: [
            "Does {player} make the right tactical choices consistently?",
        ],
        QualityBand.LOW: [
            "Is {player} tactically naive, or simply poorly coached so far?",
            "Will {player} cope with a more demanding tactical set-up?",
        ],
    },
    MomentType.CHARACTER_REVEAL: {
        QualityBand.HIGH: [
            "Is {player} the leader in that dressing room that today's moment suggested?",
            "Is {player}'s professionalism the real thing?",
        ],
        QualityBand.MIXED: [
            "What is {player} really like as a character? The evidence is mixed.",
        ],
        QualityBand.LOW: [
            "Is there an attitude problem with {player}, or was this a one-off?",
            "Could {player}'s temperament hold back an otherwise promising career?",
        ],
    },
}


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class HypothesisEvidence:
    """One piece of evidence for or against a hypothesis."""

    week: int
    description: str
    direction: EvidenceDirection
    strength: EvidenceStrength

    @property
    def weight(self) -> float:
        return evidence_weight(self.strength)

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "description": self.description,
            "direction": self.direction.value,
            "strength": self.strength.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HypothesisEvidence":
        return cls(
            week=data["week"],
            description=data.get("description", ""),
            direction=EvidenceDirection(data["direction"]),
            strength=EvidenceStrength(data["strength"]),
        )


@dataclass
class Hypothesis:
    """An investigative question about one player in one attribute domain."""

    id: str
    player_id: str
    player_name: str
    text: str
    domain: AttributeDomain
    state: HypothesisState = HypothesisState.OPEN
    evidence: list[HypothesisEvidence] = field(default_factory=list)
    created_week: int = 1
    resolved_week: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "player_id": self.player_id,
            "player_name": self.player_name,
            "text": self.text,
            "domain": self.domain.value,
            "state": self.state.value,
            "evidence": [e.to_dict() for e in self.evidence],
            "created_week": self.created_week,
            "resolved_week": self.resolved_week,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Hypothesis":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            player_id=data["player_id"],
            player_name=data.get("player_name", ""),
            text=data.get("text", ""),
            domain=AttributeDomain(data["domain"]),
            state=HypothesisState(data.get("state", "open")),
            evidence=[HypothesisEvidence.from_dict(e) for e in data.get("evidence", [])],
            created_week=data.get("created_week", 1),
            resolved_week=data.get("resolved_week"),
        )


# =============================================================================
# Helpers
# =============================================================================

def classify_evidence_strength(quality: int) -> EvidenceStrength:
    """Strength tier of a moment's evidence, from its raw quality."""
    if quality >= STRONG_EVIDENCE:
        return EvidenceStrength.STRONG
    if quality >= MODERATE_EVIDENCE:
        return EvidenceStrength.MODERATE
    return EvidenceStrength.WEAK


def evidence_weight(strength: EvidenceStrength) -> float:
    config = get_config()
    if strength == EvidenceStrength.STRONG:
        return config.strong_evidence_weight
    if strength == EvidenceStrength.MODERATE:
        return config.moderate_evidence_weight
    return config.weak_evidence_weight


def weigh_evidence(evidence: list[HypothesisEvidence]) -> tuple[float, float]:
    """Total (for, against) weight across an evidence list."""
    weight_for = sum(e.weight for e in evidence if e.direction == EvidenceDirection.FOR)
    weight_against = sum(
        e.weight for e in evidence if e.direction == EvidenceDirection.AGAINST
    )
    return weight_for, weight_against


def quality_band(average_quality: float) -> QualityBand:
    if average_quality >= HIGH_QUALITY:
        return QualityBand.HIGH
    if average_quality < LOW_QUALITY:
        return QualityBand.LOW
    return QualityBand.MIXED


def dominant_moment_type(moments: list[PlayerMoment]) -> MomentType:
    """Most frequent moment type; the first one seen wins a tie."""
    counts = Counter(m.moment_type for m in moments)
    # Counter keeps insertion order and max() returns the first maximum
    return max(counts, key=lambda t: counts[t])


# =============================================================================
# Operations
# =============================================================================

def generate_hypothesis(
    rng: random.Random,
    player_id: str,
    player_name: str,
    moments: list[PlayerMoment],
    week: int,
) -> Optional[Hypothesis]:
    """
    Possibly form a new hypothesis from a session's moments.

    Needs enough moments for the player and then a separate chance roll;
    otherwise returns None. The roll is only made once the moment count
    passes.

    Args:
        rng: Session RNG (gate, template, id suffix, in that order)
        player_id: Player the moments must belong to
        player_name: Name substituted into the question
        moments: All moments from the session (any player)
        week: Current week

    Returns:
        An open hypothesis with no evidence, or None
    """
    config = get_config()
    player_moments = [m for m in moments if m.player_id == player_id]
    if len(player_moments) < config.min_moments_for_hypothesis:
        return None
    if rng.random() >= config.hypothesis_trigger_chance:
        return None

    moment_type = dominant_moment_type(player_moments)
    average_quality = sum(m.quality for m in player_moments) / len(player_moments)
    band = quality_band(average_quality)

    pool = TEMPLATES[moment_type][band]
    if not pool:
        pool = [t for templates in TEMPLATES[moment_type].values() for t in templates]
    text = rng.choice(pool).format(player=player_name)

    hypothesis_id = f"hyp-{player_id[:8]}-w{week}-{rng.randint(1000, 9999)}"
    logger.debug(
        "Hypothesis %s formed on %s (%s, %s band)",
        hypothesis_id, player_name, moment_type.value, band.value,
    )

    return Hypothesis(
        id=hypothesis_id,
        player_id=player_id,
        player_name=player_name,
        text=text,
        domain=moment_type.domain,
        state=HypothesisState.OPEN,
        evidence=[],
        created_week=week,
    )


def evaluate_hypothesis(
    hypothesis: Hypothesis,
    new_moments: list[PlayerMoment],
    week: int,
) -> Hypothesis:
    """
    Fold new moments into a hypothesis as evidence.

    Only moments for the same player in the same domain count. High
    quality moments are evidence for, low quality against, and mid-range
    moments are ignored as inconclusive. Terminal hypotheses, and calls
    that add no evidence, return the hypothesis unchanged.
    """
    if hypothesis.is_terminal:
        return hypothesis

    relevant = [
        m for m in new_moments
        if m.player_id == hypothesis.player_id and m.moment_type.domain == hypothesis.domain
    ]

    added: list[HypothesisEvidence] = []
    for moment in relevant:
        if moment.quality >= HIGH_QUALITY:
            direction = EvidenceDirection.FOR
            tone = "positive"
        elif moment.quality < LOW_QUALITY:
            direction = EvidenceDirection.AGAINST
            tone = "negative"
        else:
            continue
        description = f"{tone} {moment.moment_type.value} observation (quality {moment.quality}/10)"
        if moment.vague_description:
            description = f"{description} - {moment.vague_description}"
        added.append(HypothesisEvidence(
            week=week,
            description=description,
            direction=direction,
            strength=classify_evidence_strength(moment.quality),
        ))

    if not added:
        return hypothesis

    evidence = [*hypothesis.evidence, *added]
    weight_for, weight_against = weigh_evidence(evidence)
    state = hypothesis.state
    if weight_for > weight_against:
        state = HypothesisState.SUPPORTED
    elif weight_against > weight_for:
        state = HypothesisState.CONTRADICTED

    return replace(hypothesis, evidence=evidence, state=state)


def resolve_hypothesis(hypothesis: Hypothesis, week: int) -> Hypothesis:
    """
    Force a hypothesis to a terminal state from its weighted evidence.

    An exact tie leaves it where it is, still open to evidence.
    """
    if hypothesis.is_terminal:
        return hypothesis

    weight_for, weight_against = weigh_evidence(hypothesis.evidence)
    if weight_for > weight_against:
        state = HypothesisState.CONFIRMED
    elif weight_against > weight_for:
        state = HypothesisState.DEBUNKED
    else:
        return hypothesis

    logger.debug("Hypothesis %s resolved as %s", hypothesis.id, state.value)
    return replace(hypothesis, state=state, resolved_week=week)


def get_hypothesis_insight_bonus(hypothesis: Hypothesis) -> int:
    """Insight points for a resolved hypothesis (debunked still earns some)."""
    config = get_config()
    if hypothesis.state == HypothesisState.CONFIRMED:
        return config.confirmed_insight_bonus
    if hypothesis.state == HypothesisState.DEBUNKED:
        return config.debunked_insight_bonus
    return 0


def get_open_hypotheses(
    hypotheses: list[Hypothesis],
    player_id: Optional[str] = None,
) -> list[Hypothesis]:
    """Hypotheses still taking evidence, optionally for one player."""
    return [
        h for h in hypotheses
        if not h.is_terminal and (player_id is None or h.player_id == player_id)
    ]


def get_resolved_hypotheses(
    hypotheses: list[Hypothesis],
    player_id: Optional[str] = None,
) -> list[Hypothesis]:
    """Confirmed or debunked hypotheses, optionally for one player."""
    return [
        h for h in hypotheses
        if h.is_terminal and (player_id is None or h.player_id == player_id)
    ]
