"""Tests for side-by-side report comparison."""

import pytest

from talentscout.core.attributes import AttributeDomain, AttributeRegistry
from talentscout.core.enums import Position
from talentscout.core.scouting.report import AttributeAssessment, ConvictionLevel, ScoutReport
from talentscout.core.scouting.report_comparison import (
    NOT_ENOUGH_REPORTS,
    TacticalStyle,
    calculate_position_fit,
    calculate_value_score,
    compare_reports,
    generate_comparison_summary,
)


def assessment(name: str, value: int) -> AttributeAssessment:
    return AttributeAssessment(name, value, (value - 1, value + 1), AttributeRegistry.domain_of(name))


def report(report_id: str, player_id: str, values: dict[str, int], **kwargs) -> ScoutReport:
    return ScoutReport(
        id=report_id,
        player_id=player_id,
        scout_id="scout-1",
        submitted_week=1,
        submitted_season=1,
        attribute_assessments=[assessment(name, value) for name, value in values.items()],
        **kwargs,
    )


@pytest.fixture
def pair() -> list[ScoutReport]:
    return [
        report("r1", "player-1", {"passing": 15, "pace": 12}, estimated_value=3_000_000),
        report(
            "r2", "p2", {"vision": 16, "passing": 12},
            estimated_value=1_500_000,
            conviction=ConvictionLevel.RECOMMEND,
            perceived_ca_stars=2.5,
        ),
    ]


# =============================================================================
# Comparison
# =============================================================================


class TestCompareReports:

    def test_needs_two_reports(self, pair):
        comparison = compare_reports(pair[:1])
        assert comparison.summary == NOT_ENOUGH_REPORTS
        assert comparison.attributes == []
        assert len(comparison.metrics) == 1
        assert generate_comparison_summary([]) == NOT_ENOUGH_REPORTS

    def test_rows_follow_domain_order(self, pair):
        comparison = compare_reports(pair)
        assert [row.attribute for row in comparison.attributes] == ["passing", "pace", "vision"]
        assert [row.domain for row in comparison.attributes] == [
            AttributeDomain.TECHNICAL, AttributeDomain.PHYSICAL, AttributeDomain.MENTAL,
        ]

    def test_missing_assessments_read_zero(self, pair):
        """An attribute one report never assessed shows as 0 with a (0, 0) range."""
        rows = {row.attribute: row for row in compare_reports(pair).attributes}

        assert rows["passing"].values == [15, 12]
        assert rows["passing"].best_index == 0
        assert rows["pace"].values == [12, 0]
        assert rows["pace"].ranges == [(11, 13), (0, 0)]
        assert rows["vision"].best == 16
        assert rows["vision"].best_index == 1

    def test_metrics(self, pair, player):
        comparison = compare_reports(pair, {player.id: player})
        first, second = comparison.metrics

        assert first.player_name == player.full_name
        assert second.player_name == "p2"
        assert second.perceived_ability == 89
        assert first.average_attribute == pytest.approx(13.5)
        assert comparison.report_ids == ["r1", "r2"]
        assert comparison.player_ids == ["player-1", "p2"]

    def test_summary(self, pair):
        summary = compare_reports(pair).summary
        assert "Player 2 has the highest average scouted attributes (14.0)." in summary
        assert "Player 1 leads in 2 of 3 assessed attributes." in summary
        assert "Player 2 is the most affordable option at an estimated value of 1.5M." in summary
        assert "Player 2 carries the highest conviction level: a recommendation." in summary


# =============================================================================
# Value and Fit
# =============================================================================


class TestValueScore:

    def test_no_fee_or_no_assessments(self, pair):
        assert calculate_value_score(pair[0], 0) is None
        assert calculate_value_score(report("r", "p", {}), 5_000_000) is None

    @pytest.mark.parametrize("fee,score", [(50_000, 100), (1_000_000, 80), (100_000_000, 40)])
    def test_fee_pressure(self, fee, score):
        """Fees scale the score down on a log scale from 100k to 100M."""
        elite = report("r", "p", {"passing": 20, "vision": 20})
        assert calculate_value_score(elite, fee) == score


class TestPositionFit:

    def test_nothing_to_score(self):
        assert calculate_position_fit(report("r", "p", {}), Position.GK) == 50

    def test_no_key_attributes_assessed(self):
        """Without any key attribute the fit starts from 40."""
        assert calculate_position_fit(report("r", "p", {"pace": 18}), Position.GK) == 40

    def test_key_attributes(self):
        keeper = report("r", "p", {"composure": 20, "positioning": 20})
        assert calculate_position_fit(keeper, Position.GK) == 80

        average = report("r", "p", {"composure": 5, "positioning": 20})
        assert calculate_position_fit(average, Position.GK) == 40

    def test_style_bonus(self):
        """Style attributes add up to 20; unassessed ones add nothing."""
        keeper = report("r", "p", {"composure": 20, "positioning": 20})
        assert calculate_position_fit(keeper, Position.GK, TacticalStyle.POSSESSION) == 100
        assert calculate_position_fit(keeper, Position.GK, TacticalStyle.WING_PLAY) == 80
