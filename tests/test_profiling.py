"""Tests for statistical profiling."""

import random

import pytest

from talentscout.core.enums import Position
from talentscout.core.scouting.profiling import (
    RATE_STATS,
    TREND_STATS,
    AnomalyDirection,
    DatabaseQueryFilters,
    Stat,
    StatsBriefing,
    StatisticalProfile,
    Trend,
    build_peer_map,
    build_profile,
    compute_percentile,
    derive_trend,
    execute_database_query,
    execute_deep_video_analysis,
    generate_stats_briefing,
    noise_factor_for_skill,
)


# =============================================================================
# Helpers
# =============================================================================


class TestHelpers:

    @pytest.mark.parametrize("skill,factor", [(1, 0.15), (7, 0.15), (8, 0.08), (14, 0.08), (15, 0.03), (20, 0.03)])
    def test_noise_tiers(self, skill, factor):
        assert noise_factor_for_skill(skill) == factor

    def test_percentile_without_peers(self):
        assert compute_percentile(0.4, []) == 50

    def test_percentile_bounds(self):
        """The lowest value ranks 0 and anything above every peer ranks 100."""
        peers = [0.1, 0.2, 0.3, 0.4]
        assert compute_percentile(0.1, peers) == 0
        assert compute_percentile(0.5, peers) == 100
        assert compute_percentile(0.3, peers) == 50

    def test_trend_bias_follows_form(self):
        """Good form tilts trends upward."""
        rng = random.Random(11)
        rolls = [derive_trend(rng, 3) for _ in range(1000)]
        assert rolls.count(Trend.RISING) > rolls.count(Trend.FALLING)

    def test_profile_shape(self, rng, player):
        profile = build_profile(rng, player, 0.15, build_peer_map([player]), season=2, week=7)

        assert set(profile.per_90) == set(Stat)
        assert set(profile.trends) == set(TREND_STATS)
        assert profile.last_updated_week == 7
        for stat in RATE_STATS:
            assert 0.0 <= profile.per_90[stat] <= 1.0
        assert all(v >= 0 for v in profile.per_90.values())

    def test_profile_from_dict(self, rng, player):
        profile = build_profile(rng, player, 0.08, build_peer_map([player]), season=1, week=1)
        assert StatisticalProfile.from_dict(profile.to_dict()) == profile


# =============================================================================
# Database Query
# =============================================================================


class TestDatabaseQuery:

    def test_filters_to_league_and_position(self, rng, scout, league, league_players):
        result = execute_database_query(
            rng, scout, league, league_players,
            DatabaseQueryFilters(position=Position.ST), season=1, week=5,
        )
        assert sorted(result.player_ids) == ["st-high", "st-low", "st-mid"]
        assert [p.player_id for p in result.profiles] == result.player_ids

    def test_percentiles_rank_against_position_peers(self, rng, scout, league, league_players):
        """Percentiles use the raw values, so noise cannot reorder peers."""
        result = execute_database_query(
            rng, scout, league, league_players,
            DatabaseQueryFilters(position=Position.ST), season=1, week=5,
        )
        by_id = {p.player_id: p for p in result.profiles}
        assert by_id["st-low"].percentiles[Stat.GOALS] == 0
        assert by_id["st-high"].percentiles[Stat.GOALS] == 67
        for profile in result.profiles:
            assert all(0 <= v <= 100 for v in profile.percentiles.values())

    def test_no_matches(self, rng, scout, league, league_players):
        result = execute_database_query(
            rng, scout, league, league_players,
            DatabaseQueryFilters(position=Position.GK), season=1, week=5,
        )
        assert result.player_ids == []
        assert result.profiles == []

    def test_result_count_by_skill(self, novice_scout, league, league_players):
        """Low data literacy returns three to five players."""
        for seed in range(20):
            result = execute_database_query(
                random.Random(seed), novice_scout, league, league_players,
                DatabaseQueryFilters(), season=1, week=1,
            )
            assert 3 <= len(result.player_ids) <= 5

    def test_age_and_form_filters(self, rng, scout, league, league_players):
        young = execute_database_query(
            rng, scout, league, league_players, DatabaseQueryFilters(max_age=20), season=1, week=1
        )
        assert sorted(young.player_ids) == ["cm-high", "cm-low"]

        streaky = execute_database_query(
            rng, scout, league, league_players, DatabaseQueryFilters(anomalies_only=True), season=1, week=1
        )
        assert sorted(streaky.player_ids) == ["cm-mid", "st-high"]

    def test_deterministic_for_seed(self, scout, league, league_players):
        first = execute_database_query(
            random.Random(8), scout, league, league_players, DatabaseQueryFilters(), season=1, week=1
        )
        second = execute_database_query(
            random.Random(8), scout, league, league_players, DatabaseQueryFilters(), season=1, week=1
        )
        assert first == second


# =============================================================================
# Deep Video Analysis
# =============================================================================


class TestDeepVideoAnalysis:

    def test_fresh_profile(self, rng, scout, player):
        profile = execute_deep_video_analysis(rng, scout, player, season=1, week=3)
        assert profile.player_id == player.id
        assert profile.last_updated_week == 3

    def test_blends_with_existing_profile(self, scout, player):
        """A repeat analysis blends 60% new with 40% old, at reduced noise."""
        existing = execute_deep_video_analysis(random.Random(1), scout, player, season=1, week=3)
        refined = execute_deep_video_analysis(
            random.Random(2), scout, player, season=1, week=6, existing_profile=existing
        )

        fresh = build_profile(
            random.Random(2), player, noise_factor_for_skill(10) * 0.6,
            build_peer_map([player]), season=1, week=6,
        )
        for stat in Stat:
            expected = fresh.per_90[stat] * 0.6 + existing.per_90[stat] * 0.4
            assert refined.per_90[stat] == pytest.approx(expected)
        assert existing.last_updated_week == 3


# =============================================================================
# Stats Briefing
# =============================================================================


class TestStatsBriefing:

    def test_empty_league(self, rng, scout, league):
        assert generate_stats_briefing(rng, scout, league, {}, season=1, week=1) == StatsBriefing()

    def test_top_performers(self, rng, scout, league, league_players):
        briefing = generate_stats_briefing(rng, scout, league, league_players, season=1, week=4)

        assert 3 <= len(briefing.top_performers) <= 5
        assert briefing.top_performers[0] == "st-high"
        assert "outsider" not in briefing.top_performers
        assert briefing.highlights[0].startswith("Premier Division stats briefing for week 4")

    def test_anomalies_are_goal_outliers(self, expert_scout, league, league_players):
        """Briefing anomalies come from goals z-scores within the league."""
        for seed in range(10):
            briefing = generate_stats_briefing(
                random.Random(seed), expert_scout, league, league_players, season=1, week=4
            )
            assert len(briefing.anomalies) <= 4
            for anomaly in briefing.anomalies:
                assert anomaly.stat == Stat.GOALS
                assert anomaly.player_id in league_players
                assert anomaly.player_id != "outsider"
                assert anomaly.direction in (AnomalyDirection.POSITIVE, AnomalyDirection.NEGATIVE)
                assert anomaly.week == 4
                assert not anomaly.investigated
