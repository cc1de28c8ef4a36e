"""Tests for the analytics department."""

import random

import pytest

from talentscout.core.models import League
from talentscout.core.scouting.analysts import (
    AnalystFocus,
    DataAnalyst,
    generate_analyst_candidate,
    generate_analyst_report,
    get_analyst_salary_cost,
    update_analyst_morale,
)
from talentscout.core.scouting.profiling import AnomalyDirection


def analyst(skill: int = 10, focus: AnalystFocus = AnalystFocus.GENERAL, morale: int = 70) -> DataAnalyst:
    return DataAnalyst(id="analyst-1", name="Sam Cole", skill=skill, focus=focus, morale=morale)


# =============================================================================
# Hiring
# =============================================================================


class TestAnalystCandidate:

    def test_candidate_fields(self):
        """Salary follows skill at 50 plus 30 per point."""
        for seed in range(30):
            candidate = generate_analyst_candidate(random.Random(seed), season=2, id_seed=str(seed))
            assert 1 <= candidate.skill <= 20
            assert candidate.weekly_salary == 50 + candidate.skill * 30
            assert candidate.morale == 70
            assert candidate.tenure_weeks == 0
            assert candidate.id == f"analyst_2_{seed}"
            assert " " in candidate.name

    def test_invalid_skill(self):
        with pytest.raises(ValueError):
            DataAnalyst(skill=0)

    def test_salary_cost(self):
        staff = [analyst(skill=5), DataAnalyst(id="a2", skill=9, weekly_salary=320)]
        assert get_analyst_salary_cost(staff) == staff[0].weekly_salary + 320
        assert get_analyst_salary_cost([]) == 0


# =============================================================================
# Reports
# =============================================================================


class TestAnalystReport:

    def test_empty_league(self, rng, league_players):
        empty = League(id="empty", name="Nowhere", club_ids=["club-q"])
        report = generate_analyst_report(rng, analyst(), empty, league_players, season=1, week=3)
        assert report.highlights == []
        assert report.anomalies == []
        assert 0 <= report.quality <= 100
        assert report.league_id == "empty"

    def test_highlights_come_from_league(self, league, league_players):
        for seed in range(20):
            report = generate_analyst_report(
                random.Random(seed), analyst(skill=15), league, league_players, season=1, week=3
            )
            assert 1 <= len(report.highlights) <= 5
            assert len(set(report.highlights)) == len(report.highlights)
            assert "outsider" not in report.highlights

    def test_youth_focus(self, league, league_players):
        """Youth analysts only highlight under-21s when the league has any."""
        for seed in range(10):
            report = generate_analyst_report(
                random.Random(seed), analyst(focus=AnalystFocus.YOUTH), league, league_players, 1, 3
            )
            assert set(report.highlights) <= {"cm-low", "cm-high"}

    def test_form_focus(self, league, league_players):
        """Form analysts highlight players with |form| above 1."""
        for seed in range(10):
            report = generate_analyst_report(
                random.Random(seed), analyst(focus=AnalystFocus.FORM_PLAYERS), league, league_players, 1, 3
            )
            assert set(report.highlights) <= {"st-high", "cm-mid"}

    def test_anomalies(self, league, league_players):
        """Flags follow form direction and never exceed the quality cap."""
        for seed in range(20):
            report = generate_analyst_report(
                random.Random(seed), analyst(skill=20), league, league_players, season=2, week=8
            )
            assert len(report.anomalies) <= max(1, report.quality // 30)
            for anomaly in report.anomalies:
                expected = (
                    AnomalyDirection.POSITIVE
                    if league_players[anomaly.player_id].form >= 0
                    else AnomalyDirection.NEGATIVE
                )
                assert anomaly.direction == expected
                assert 0.5 <= anomaly.severity <= 4.0
                assert (anomaly.season, anomaly.week) == (2, 8)

    def test_quality_follows_skill_and_morale(self, league, league_players):
        strong = [
            generate_analyst_report(random.Random(s), analyst(skill=18, morale=100), league, league_players, 1, 1).quality
            for s in range(30)
        ]
        weak = [
            generate_analyst_report(random.Random(s), analyst(skill=4, morale=20), league, league_players, 1, 1).quality
            for s in range(30)
        ]
        assert sum(strong) / 30 > sum(weak) / 30 + 40


# =============================================================================
# Morale
# =============================================================================


class TestAnalystMorale:

    def test_weekly_decay(self):
        assert update_analyst_morale(analyst(morale=70)).morale == 69

    def test_meeting_and_used_report(self):
        """Decay of 1, plus 5 for a meeting and 3 for a used report."""
        updated = update_analyst_morale(analyst(morale=70), had_meeting=True, report_used=True)
        assert updated.morale == 77

    def test_ignored_report(self):
        assert update_analyst_morale(analyst(morale=70), report_ignored=True).morale == 64

    def test_clamped(self):
        assert update_analyst_morale(analyst(morale=2), report_ignored=True).morale == 0
        assert update_analyst_morale(analyst(morale=99), had_meeting=True).morale == 100

    def test_returns_copy(self):
        original = analyst(morale=70)
        update_analyst_morale(original, had_meeting=True)
        assert original.morale == 70
