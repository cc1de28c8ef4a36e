"""
Prediction tracker.

Scouts stake their reputation on falsifiable calls about a player's
future. Predictions resolve once their deadline season is reached, using
coarse proxies for what happened (the engine has no league table or
transfer log at this layer). A resolved prediction never changes again.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Optional

from talentscout.core.config import get_config
from talentscout.core.models.player import Player
from talentscout.core.models.scout import Scout
from talentscout.core.numeric import clamp
from talentscout.core.scouting.profiling import Stat, StatisticalProfile

logger = logging.getLogger(__name__)


class PredictionType(str, Enum):
    BREAKOUT = "breakout"
    DECLINE = "decline"
    TRANSFER = "transfer"
    INJURY = "injury"
    TOP_SCORER = "top_scorer"
    RELEGATION = "relegation"


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class Prediction:
    """A scout's claim about a player's future."""

    id: str
    scout_id: str
    player_id: str
    type: PredictionType
    statement: str
    confidence: float  # 0-1
    made_in_season: int
    made_in_week: int
    resolve_by_season: int
    resolved: bool = False
    was_correct: Optional[bool] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Prediction confidence must be 0-1, got {self.confidence}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "scout_id": self.scout_id,
            "player_id": self.player_id,
            "type": self.type.value,
            "statement": self.statement,
            "confidence": self.confidence,
            "made_in_season": self.made_in_season,
            "made_in_week": self.made_in_week,
            "resolve_by_season": self.resolve_by_season,
            "resolved": self.resolved,
            "was_correct": self.was_correct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Prediction":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            scout_id=data["scout_id"],
            player_id=data["player_id"],
            type=PredictionType(data["type"]),
            statement=data.get("statement", ""),
            confidence=data["confidence"],
            made_in_season=data["made_in_season"],
            made_in_week=data["made_in_week"],
            resolve_by_season=data["resolve_by_season"],
            resolved=data.get("resolved", False),
            was_correct=data.get("was_correct"),
        )


@dataclass
class PredictionAccuracy:
    """A scout's long-run calibration."""

    total: int = 0  # Resolved predictions
    correct: int = 0
    accuracy: float = 0.0
    streak: int = 0  # Consecutive correct calls, most recent first
    is_oracle: bool = False


@dataclass
class PredictionSuggestion:
    """A prediction the scout might want to make."""

    type: PredictionType
    statement: str
    suggested_confidence: float


# =============================================================================
# Creation and Resolution
# =============================================================================

def create_prediction(
    scout_id: str,
    player_id: str,
    prediction_type: PredictionType,
    statement: str,
    confidence: float,
    week: int,
    season: int,
    same_season: bool = False,
    prediction_id: Optional[str] = None,
) -> Prediction:
    """
    Create an unresolved prediction.

    Resolves at the end of next season unless same_season is set.
    """
    if prediction_id is None:
        prediction_id = (
            f"prediction_{scout_id}_{player_id}_{prediction_type.value}_s{season}w{week}"
        )
    return Prediction(
        id=prediction_id,
        scout_id=scout_id,
        player_id=player_id,
        type=prediction_type,
        statement=statement,
        confidence=confidence,
        made_in_season=season,
        made_in_week=week,
        resolve_by_season=season if same_season else season + 1,
    )


def _scoring_threat(player: Player) -> float:
    a = player.attributes
    return a["shooting"] * 0.5 + a["composure"] * 0.3 + a["positioning"] * 0.2


def _evaluate(
    prediction: Prediction,
    player: Player,
    players: Mapping[str, Player],
    current_season: int,
    rng: random.Random,
    free_agent_ids: set[str],
) -> bool:
    """Decide one prediction from its proxy. Injury and relegation roll the RNG."""
    kind = prediction.type

    if kind == PredictionType.BREAKOUT:
        return player.age <= 23 and player.form >= 1 and player.current_ability >= 100

    if kind == PredictionType.DECLINE:
        return player.age >= 30 and player.form < 0

    if kind == PredictionType.TRANSFER:
        return (
            player.id in free_agent_ids
            or player.morale <= 4
            or player.contract_expiry <= current_season
        )

    if kind == PredictionType.INJURY:
        if player.injured:
            chance = 0.7
        else:
            chance = player.attributes["injury_proneness"] / 20 * 0.5
        return rng.random() < chance

    if kind == PredictionType.TOP_SCORER:
        best = max(_scoring_threat(p) for p in players.values())
        return _scoring_threat(player) >= best * 0.95

    if kind == PredictionType.RELEGATION:
        chance = 0.5 if player.morale <= 5 else 0.25
        return rng.random() < chance

    raise ValueError(f"Unknown prediction type: {kind}")


def resolve_predictions(
    predictions: list[Prediction],
    players: Mapping[str, Player],
    current_season: int,
    current_week: int,
    rng: random.Random,
    free_agent_ids: Optional[set[str]] = None,
) -> list[Prediction]:
    """
    Resolve every prediction that has reached its deadline.

    Already-resolved and not-yet-due predictions come back as the same
    objects. A player missing from the pool (retired, left the game)
    counts as an incorrect call.

    Args:
        predictions: All of the scout's predictions
        players: Every known player, keyed by id
        current_season: Season being closed out
        current_week: Week of resolution (used for logging only)
        rng: Session RNG, drawn once per injury/relegation resolution
        free_agent_ids: Players currently without a club

    Returns:
        A new list, in the original order
    """
    free_agents = free_agent_ids or set()
    resolved: list[Prediction] = []

    for prediction in predictions:
        if prediction.resolved or prediction.resolve_by_season > current_season:
            resolved.append(prediction)
            continue

        player = players.get(prediction.player_id)
        if player is None:
            was_correct = False
        else:
            was_correct = _evaluate(prediction, player, players, current_season, rng, free_agents)

        logger.debug(
            "Prediction %s (%s) resolved in s%dw%d: %s",
            prediction.id, prediction.type.value, current_season, current_week,
            "correct" if was_correct else "incorrect",
        )
        resolved.append(replace(prediction, resolved=True, was_correct=was_correct))

    return resolved


def calculate_prediction_accuracy(predictions: list[Prediction]) -> PredictionAccuracy:
    """
    Accuracy, current streak and oracle status over resolved predictions.

    The streak walks back from the most recent resolved call (by season,
    then week) and stops at the first miss.
    """
    config = get_config()
    resolved = [p for p in predictions if p.resolved]
    if not resolved:
        return PredictionAccuracy()

    correct = sum(1 for p in resolved if p.was_correct)
    accuracy = correct / len(resolved)

    streak = 0
    ordered = sorted(resolved, key=lambda p: (p.made_in_season, p.made_in_week))
    for prediction in reversed(ordered):
        if not prediction.was_correct:
            break
        streak += 1

    return PredictionAccuracy(
        total=len(resolved),
        correct=correct,
        accuracy=accuracy,
        streak=streak,
        is_oracle=accuracy >= config.oracle_accuracy and len(resolved) >= config.oracle_min_resolved,
    )


# =============================================================================
# Suggestions
# =============================================================================

def generate_prediction_suggestions(
    rng: random.Random,
    scout: Scout,
    player: Player,
    current_season: int,
    profile: Optional[StatisticalProfile] = None,
) -> list[PredictionSuggestion]:
    """
    Suggest up to three predictions the evidence supports.

    Each rule has its own gate. Suggested confidences carry Gaussian noise
    whose spread shrinks with data literacy, so skilled scouts are better
    calibrated rather than merely more often right.
    """
    skill = scout.data_literacy
    noise_sd = max(0.05, (20 - skill) * 0.01)

    def calibrate(base: float) -> float:
        return clamp(base + rng.gauss(0, noise_sd), 0.1, 0.95)

    name = player.full_name
    suggestions: list[PredictionSuggestion] = []

    if player.form > 2 and player.age < 22:
        base = 0.5 + player.form / 3 * 0.2 + (22 - player.age) / 22 * 0.1
        suggestions.append(PredictionSuggestion(
            type=PredictionType.BREAKOUT,
            statement=f"{name} has the look of a breakout season: outstanding form at {player.age}.",
            suggested_confidence=calibrate(base),
        ))

    if player.age > 30 and player.form < 0:
        base = 0.4 + (player.age - 30) / 10 * 0.2 + abs(player.form) * 0.05
        suggestions.append(PredictionSuggestion(
            type=PredictionType.DECLINE,
            statement=f"At {player.age} and out of form, {name} may be starting to decline.",
            suggested_confidence=calibrate(base),
        ))

    if player.contract_expiry <= current_season + 1:
        expired = player.contract_expiry <= current_season
        base = 0.75 if expired else 0.5
        contract = "an expired" if expired else "a soon-expiring"
        suggestions.append(PredictionSuggestion(
            type=PredictionType.TRANSFER,
            statement=f"{name} has {contract} contract, a move looks increasingly likely.",
            suggested_confidence=calibrate(base),
        ))

    proneness = player.attributes["injury_proneness"]
    injury_threshold = 16 - skill // 4
    if proneness > injury_threshold:
        base = max(0.2, (proneness - injury_threshold) / (20 - injury_threshold))
        suggestions.append(PredictionSuggestion(
            type=PredictionType.INJURY,
            statement=f"The indicators suggest {name} carries a real injury risk next season.",
            suggested_confidence=calibrate(base),
        ))

    if profile is not None:
        goals_percentile = profile.percentiles.get(Stat.GOALS, 0)
        if goals_percentile >= 75:
            base = 0.3 + (goals_percentile - 75) / 100
            suggestions.append(PredictionSuggestion(
                type=PredictionType.TOP_SCORER,
                statement=(
                    f"{name} ranks in the top {100 - goals_percentile}% for goals per 90 "
                    f"at the position, a top scorer candidate."
                ),
                suggested_confidence=calibrate(base),
            ))

    shuffled = rng.sample(suggestions, len(suggestions))
    return shuffled[:get_config().max_prediction_suggestions]
