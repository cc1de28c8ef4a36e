"""Assessment engine: comparisons, hypotheses, profiling, reports and predictions."""

from talentscout.core.scouting.analysts import (
    AnalystFocus,
    AnalystReport,
    DataAnalyst,
    generate_analyst_candidate,
    generate_analyst_report,
    get_analyst_salary_cost,
    update_analyst_morale,
)
from talentscout.core.scouting.comparison import (
    BenchPlayer,
    ComparisonBench,
    ComparisonResult,
    ComparisonTier,
    add_to_bench,
    compare_against_bench,
    compare_player,
    create_comparison_bench,
    find_closest_bench_match,
    remove_from_bench,
)
from talentscout.core.scouting.hypothesis import (
    EvidenceDirection,
    EvidenceStrength,
    Hypothesis,
    HypothesisEvidence,
    HypothesisState,
    evaluate_hypothesis,
    generate_hypothesis,
    get_hypothesis_insight_bonus,
    get_open_hypotheses,
    get_resolved_hypotheses,
    resolve_hypothesis,
)
from talentscout.core.scouting.predictions import (
    Prediction,
    PredictionAccuracy,
    PredictionSuggestion,
    PredictionType,
    calculate_prediction_accuracy,
    create_prediction,
    generate_prediction_suggestions,
    resolve_predictions,
)
from talentscout.core.scouting.profiling import (
    AnomalyDirection,
    AnomalyFlag,
    DatabaseQueryFilters,
    DatabaseQueryResult,
    Stat,
    StatisticalProfile,
    StatsBriefing,
    Trend,
    execute_database_query,
    execute_deep_video_analysis,
    generate_stats_briefing,
)
from talentscout.core.scouting.report import (
    AttributeAssessment,
    ConvictionLevel,
    QualityBreakdown,
    QualityEstimate,
    ReportDraft,
    ScoutReport,
    calculate_report_quality,
    estimate_report_quality,
    finalize_report,
    generate_report_content,
    score_report,
    track_post_transfer,
)
from talentscout.core.scouting.report_comparison import (
    ReportComparison,
    TacticalStyle,
    calculate_position_fit,
    calculate_value_score,
    compare_reports,
)
from talentscout.core.scouting.stars import ability_to_stars, stars_to_ability

__all__ = [
    # Comparison bench
    "BenchPlayer",
    "ComparisonBench",
    "ComparisonResult",
    "ComparisonTier",
    "add_to_bench",
    "compare_against_bench",
    "compare_player",
    "create_comparison_bench",
    "find_closest_bench_match",
    "remove_from_bench",
    # Hypotheses
    "EvidenceDirection",
    "EvidenceStrength",
    "Hypothesis",
    "HypothesisEvidence",
    "HypothesisState",
    "evaluate_hypothesis",
    "generate_hypothesis",
    "get_hypothesis_insight_bonus",
    "get_open_hypotheses",
    "get_resolved_hypotheses",
    "resolve_hypothesis",
    # Statistical profiling
    "AnomalyDirection",
    "AnomalyFlag",
    "DatabaseQueryFilters",
    "DatabaseQueryResult",
    "Stat",
    "StatisticalProfile",
    "StatsBriefing",
    "Trend",
    "execute_database_query",
    "execute_deep_video_analysis",
    "generate_stats_briefing",
    # Reports
    "AttributeAssessment",
    "ConvictionLevel",
    "QualityBreakdown",
    "QualityEstimate",
    "ReportDraft",
    "ScoutReport",
    "calculate_report_quality",
    "estimate_report_quality",
    "finalize_report",
    "generate_report_content",
    "score_report",
    "track_post_transfer",
    # Predictions
    "Prediction",
    "PredictionAccuracy",
    "PredictionSuggestion",
    "PredictionType",
    "calculate_prediction_accuracy",
    "create_prediction",
    "generate_prediction_suggestions",
    "resolve_predictions",
    # Report comparison
    "ReportComparison",
    "TacticalStyle",
    "calculate_position_fit",
    "calculate_value_score",
    "compare_reports",
    # Analysts
    "AnalystFocus",
    "AnalystReport",
    "DataAnalyst",
    "generate_analyst_candidate",
    "generate_analyst_report",
    "get_analyst_salary_cost",
    "update_analyst_morale",
    # Stars
    "ability_to_stars",
    "stars_to_ability",
]
