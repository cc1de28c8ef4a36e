"""Tests for the prediction tracker."""

import random

import pytest

from talentscout.core.config import AssessmentConfig, set_config
from talentscout.core.enums import Position
from talentscout.core.scouting.predictions import (
    Prediction,
    PredictionAccuracy,
    PredictionType,
    calculate_prediction_accuracy,
    create_prediction,
    generate_prediction_suggestions,
    resolve_predictions,
)
from talentscout.core.scouting.profiling import Stat, StatisticalProfile


def predict(player_id: str, kind: PredictionType, season: int = 1, week: int = 10) -> Prediction:
    return create_prediction("scout-1", player_id, kind, "A bold call", 0.6, week=week, season=season)


def resolved(correct: bool, season: int = 1, week: int = 1) -> Prediction:
    prediction = create_prediction(
        "scout-1", "p", PredictionType.BREAKOUT, "", 0.5, week=week, season=season, same_season=True,
        prediction_id=f"pred-{season}-{week}",
    )
    prediction.resolved = True
    prediction.was_correct = correct
    return prediction


# =============================================================================
# Creation
# =============================================================================


class TestCreatePrediction:

    def test_resolves_next_season(self):
        """Predictions resolve at the end of the following season by default."""
        prediction = predict("p1", PredictionType.DECLINE, season=3, week=20)
        assert prediction.resolve_by_season == 4
        assert prediction.made_in_season == 3
        assert prediction.made_in_week == 20
        assert not prediction.resolved
        assert prediction.was_correct is None

    def test_same_season(self):
        prediction = create_prediction(
            "scout-1", "p1", PredictionType.RELEGATION, "Going down", 0.4, week=5, season=2, same_season=True
        )
        assert prediction.resolve_by_season == 2

    def test_default_id(self):
        prediction = predict("p1", PredictionType.TRANSFER, season=2, week=7)
        assert prediction.id == "prediction_scout-1_p1_transfer_s2w7"

    def test_confidence_range(self):
        with pytest.raises(ValueError):
            create_prediction("s", "p", PredictionType.INJURY, "", 1.5, week=1, season=1)


# =============================================================================
# Resolution
# =============================================================================


class TestResolvePredictions:

    def test_not_yet_due_untouched(self, rng, player):
        """A prediction due next season comes back as the same object."""
        prediction = predict(player.id, PredictionType.BREAKOUT, season=1)
        [result] = resolve_predictions([prediction], {player.id: player}, 1, 38, rng)
        assert result is prediction

    def test_already_resolved_untouched(self, rng, player):
        prediction = resolved(False)
        [result] = resolve_predictions([prediction], {player.id: player}, 5, 38, rng)
        assert result is prediction
        assert result.was_correct is False

    def test_inputs_not_mutated(self, rng, player_factory):
        """Resolution returns new predictions and leaves the inputs alone."""
        prospect = player_factory("kid", age=20, form=2, current_ability=110)
        predictions = [predict("kid", PredictionType.BREAKOUT)]
        results = resolve_predictions(predictions, {"kid": prospect}, 2, 38, rng)

        assert results[0].resolved
        assert results[0].was_correct is True
        assert not predictions[0].resolved
        assert results is not predictions

    def test_missing_player_incorrect(self, rng):
        """A player missing from the world counts as a wrong call."""
        [result] = resolve_predictions([predict("gone", PredictionType.BREAKOUT)], {}, 2, 38, rng)
        assert result.resolved
        assert result.was_correct is False

    @pytest.mark.parametrize("kind,overrides,expected", [
        (PredictionType.BREAKOUT, {"age": 23, "form": 1, "current_ability": 100}, True),
        (PredictionType.BREAKOUT, {"age": 24, "form": 3, "current_ability": 150}, False),
        (PredictionType.BREAKOUT, {"age": 20, "form": 1, "current_ability": 99}, False),
        (PredictionType.DECLINE, {"age": 30, "form": -1}, True),
        (PredictionType.DECLINE, {"age": 33, "form": 0}, False),
        (PredictionType.TRANSFER, {"morale": 4, "contract_expiry": 9}, True),
        (PredictionType.TRANSFER, {"morale": 8, "contract_expiry": 2}, True),
        (PredictionType.TRANSFER, {"morale": 8, "contract_expiry": 9}, False),
    ])
    def test_proxies(self, rng, player_factory, kind, overrides, expected):
        subject = player_factory("subject", **overrides)
        [result] = resolve_predictions([predict("subject", kind)], {"subject": subject}, 2, 38, rng)
        assert result.was_correct is expected

    def test_free_agent_transfer(self, rng, player_factory):
        subject = player_factory("subject", morale=8, contract_expiry=9)
        [result] = resolve_predictions(
            [predict("subject", PredictionType.TRANSFER)], {"subject": subject}, 2, 38, rng,
            free_agent_ids={"subject"},
        )
        assert result.was_correct is True

    def test_top_scorer(self, rng, player_factory):
        """Anyone within 95% of the best scoring threat counts as top scorer."""
        players = {
            "ace": player_factory("ace", Position.ST, level=18),
            "close": player_factory("close", Position.ST, level=17, attributes={"shooting": 18}),
            "journeyman": player_factory("journeyman", Position.ST, level=12),
        }
        predictions = [predict(pid, PredictionType.TOP_SCORER) for pid in players]
        results = resolve_predictions(predictions, players, 2, 38, rng)
        assert [r.was_correct for r in results] == [True, True, False]

    def test_injury_rate_follows_status(self, player_factory):
        """Injured players get injured again about 70% of the time."""
        rng = random.Random(21)
        crocked = player_factory("crocked", injured=True)
        predictions = [predict("crocked", PredictionType.INJURY) for _ in range(1000)]
        results = resolve_predictions(predictions, {"crocked": crocked}, 2, 38, rng)
        hits = sum(1 for r in results if r.was_correct)
        assert 640 < hits < 760

    def test_deterministic_for_seed(self, player_factory):
        subject = player_factory("subject", injured=False, morale=4)
        predictions = [
            predict("subject", PredictionType.INJURY),
            predict("subject", PredictionType.RELEGATION),
        ] * 10
        first = resolve_predictions(predictions, {"subject": subject}, 2, 38, random.Random(4))
        second = resolve_predictions(predictions, {"subject": subject}, 2, 38, random.Random(4))
        assert first == second


# =============================================================================
# Accuracy
# =============================================================================


class TestPredictionAccuracy:

    def test_no_resolved_predictions(self):
        assert calculate_prediction_accuracy([predict("p", PredictionType.DECLINE)]) == PredictionAccuracy()

    def test_oracle_at_seventy_percent_of_ten(self):
        """Ten resolved calls at 70% earn oracle status."""
        predictions = [resolved(i < 7, week=i + 1) for i in range(10)]
        accuracy = calculate_prediction_accuracy(predictions)
        assert accuracy.total == 10
        assert accuracy.correct == 7
        assert accuracy.accuracy == pytest.approx(0.7)
        assert accuracy.is_oracle

    def test_not_oracle_below_minimum(self):
        """A good rate is not enough without ten resolved calls."""
        predictions = [resolved(i < 6, week=i + 1) for i in range(9)]
        accuracy = calculate_prediction_accuracy(predictions)
        assert accuracy.accuracy == pytest.approx(6 / 9)
        assert not accuracy.is_oracle

    def test_oracle_threshold_configurable(self):
        set_config(AssessmentConfig(oracle_min_resolved=3))
        predictions = [resolved(True, week=i + 1) for i in range(3)]
        assert calculate_prediction_accuracy(predictions).is_oracle

    def test_streak_counts_most_recent_run(self):
        """The streak counts back from the latest call by season and week."""
        predictions = [
            resolved(True, season=2, week=5),
            resolved(True, season=1, week=30),
            resolved(False, season=1, week=10),
            resolved(True, season=2, week=1),
            resolved(True, season=1, week=2),
        ]
        assert calculate_prediction_accuracy(predictions).streak == 3

    def test_streak_broken_by_latest_miss(self):
        predictions = [resolved(True, week=1), resolved(False, week=2)]
        assert calculate_prediction_accuracy(predictions).streak == 0


# =============================================================================
# Suggestions
# =============================================================================


class TestPredictionSuggestions:

    def test_nothing_to_suggest(self, rng, scout, player_factory):
        steady = player_factory("steady", age=25, form=0, contract_expiry=10)
        assert generate_prediction_suggestions(rng, scout, steady, current_season=1) == []

    def test_breakout_suggested(self, rng, scout, player_factory):
        prodigy = player_factory("prodigy", age=19, form=3, contract_expiry=10)
        [suggestion] = generate_prediction_suggestions(rng, scout, prodigy, current_season=1)
        assert suggestion.type == PredictionType.BREAKOUT
        assert "prodigy" in suggestion.statement.lower()
        assert 0.1 <= suggestion.suggested_confidence <= 0.95

    def test_capped_at_three(self, rng, scout, player_factory):
        """A player who triggers every rule still yields at most three suggestions."""
        everything = player_factory(
            "everything", age=19, form=3, contract_expiry=1, attributes={"injury_proneness": 20}
        )
        profile = StatisticalProfile(player_id="everything", season=1, percentiles={Stat.GOALS: 90})
        suggestions = generate_prediction_suggestions(rng, scout, everything, current_season=1, profile=profile)

        assert len(suggestions) == 3
        assert len({s.type for s in suggestions}) == 3
        assert all(0.1 <= s.suggested_confidence <= 0.95 for s in suggestions)

    def test_confidence_tracks_evidence(self, player_factory, expert_scout):
        """Expired contracts suggest higher confidence than expiring ones."""
        expired = player_factory("expired", age=25, contract_expiry=1)
        expiring = player_factory("expiring", age=25, contract_expiry=2)
        high = [
            generate_prediction_suggestions(random.Random(s), expert_scout, expired, 1)[0].suggested_confidence
            for s in range(50)
        ]
        low = [
            generate_prediction_suggestions(random.Random(s), expert_scout, expiring, 1)[0].suggested_confidence
            for s in range(50)
        ]
        assert sum(high) / 50 == pytest.approx(0.75, abs=0.05)
        assert sum(low) / 50 == pytest.approx(0.5, abs=0.05)
