"""
Side-by-side comparison of scouting reports.

Used when a club is choosing between two or three targets: lines up the
assessed attributes, condenses each report into headline metrics and
scores value-for-money and positional fit.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from talentscout.core.attributes import AttributeDomain, AttributeRegistry
from talentscout.core.enums import Position
from talentscout.core.models.player import Player
from talentscout.core.numeric import clamp, mean, round_half_up
from talentscout.core.scouting.report import (
    AttributeAssessment,
    ConvictionLevel,
    ScoutReport,
    report_perceived_ability,
)

NOT_ENOUGH_REPORTS = "Select at least two reports to compare."

DOMAIN_ORDER = list(AttributeDomain)


class TacticalStyle(str, Enum):
    """A club's tactical identity."""

    POSSESSION = "possession"
    HIGH_PRESS = "high_press"
    COUNTER_ATTACKING = "counter_attacking"
    DIRECT = "direct"
    WING_PLAY = "wing_play"
    BALANCED = "balanced"


STYLE_ATTRIBUTES: dict[TacticalStyle, list[str]] = {
    TacticalStyle.POSSESSION: ["passing", "first_touch", "composure", "vision", "teamwork"],
    TacticalStyle.HIGH_PRESS: ["pressing", "stamina", "work_rate", "pace", "anticipation"],
    TacticalStyle.COUNTER_ATTACKING: ["pace", "off_the_ball", "finishing", "dribbling", "anticipation"],
    TacticalStyle.DIRECT: ["strength", "heading", "pace", "crossing", "shooting"],
    TacticalStyle.WING_PLAY: ["crossing", "dribbling", "pace", "agility", "off_the_ball"],
    TacticalStyle.BALANCED: ["decision_making", "composure", "teamwork", "work_rate"],
}

CONVICTION_LABELS: dict[ConvictionLevel, str] = {
    ConvictionLevel.NOTE: "a monitoring note",
    ConvictionLevel.RECOMMEND: "a recommendation",
    ConvictionLevel.STRONG_RECOMMEND: "a strong recommendation",
    ConvictionLevel.TABLE_POUND: "a table-pound conviction",
}


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class AttributeComparisonRow:
    """One attribute across every compared report (0 where unassessed)."""

    attribute: str
    domain: AttributeDomain
    values: list[int]
    ranges: list[tuple[int, int]]
    best: int
    best_index: int


@dataclass
class ReportMetrics:
    """Headline numbers for one report."""

    report_id: str
    player_id: str
    player_name: str
    perceived_ability: int
    perceived_ca_stars: Optional[float]
    perceived_pa_range: Optional[tuple[float, float]]
    estimated_value: int
    conviction: ConvictionLevel
    strength_count: int
    weakness_count: int
    average_attribute: float


@dataclass
class ReportComparison:
    report_ids: list[str] = field(default_factory=list)
    player_ids: list[str] = field(default_factory=list)
    attributes: list[AttributeComparisonRow] = field(default_factory=list)
    metrics: list[ReportMetrics] = field(default_factory=list)
    summary: str = ""


# =============================================================================
# Helpers
# =============================================================================

def _average_estimate(assessments: list[AttributeAssessment]) -> float:
    return mean([a.estimated_value for a in assessments])


def build_metrics(
    report: ScoutReport,
    players_by_id: Optional[Mapping[str, Player]] = None,
) -> ReportMetrics:
    player = (players_by_id or {}).get(report.player_id)
    return ReportMetrics(
        report_id=report.id,
        player_id=report.player_id,
        player_name=player.full_name if player else report.player_id,
        perceived_ability=report_perceived_ability(report),
        perceived_ca_stars=report.perceived_ca_stars,
        perceived_pa_range=report.perceived_pa_range,
        estimated_value=report.estimated_value,
        conviction=report.conviction,
        strength_count=len(report.strengths),
        weakness_count=len(report.weaknesses),
        average_attribute=_average_estimate(report.attribute_assessments),
    )


def _build_rows(reports: list[ScoutReport]) -> list[AttributeComparisonRow]:
    seen: dict[str, AttributeDomain] = {}
    for report in reports:
        for assessment in report.attribute_assessments:
            seen.setdefault(assessment.attribute, assessment.domain)

    rows = []
    for attribute, domain in seen.items():
        values: list[int] = []
        ranges: list[tuple[int, int]] = []
        for report in reports:
            assessment = report.get_assessment(attribute)
            values.append(assessment.estimated_value if assessment else 0)
            ranges.append(assessment.confidence_range if assessment else (0, 0))
        best = max(values)
        rows.append(AttributeComparisonRow(
            attribute=attribute,
            domain=domain,
            values=values,
            ranges=ranges,
            best=best,
            best_index=values.index(best),
        ))

    rows.sort(key=lambda r: (DOMAIN_ORDER.index(r.domain), r.attribute))
    return rows


def _format_value(value: int) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    return f"{value / 1_000:.0f}k"


# =============================================================================
# Operations
# =============================================================================

def compare_reports(
    reports: list[ScoutReport],
    players_by_id: Optional[Mapping[str, Player]] = None,
) -> ReportComparison:
    """
    Compare two or three reports side by side.

    Fewer than two reports yields metrics only, no attribute rows, and a
    prompt to select more.
    """
    metrics = [build_metrics(r, players_by_id) for r in reports]
    comparison = ReportComparison(
        report_ids=[r.id for r in reports],
        player_ids=[r.player_id for r in reports],
        metrics=metrics,
    )
    if len(reports) < 2:
        comparison.summary = NOT_ENOUGH_REPORTS
        return comparison

    comparison.attributes = _build_rows(reports)
    comparison.summary = generate_comparison_summary(reports, comparison.attributes, metrics)
    return comparison


def generate_comparison_summary(
    reports: list[ScoutReport],
    rows: Optional[list[AttributeComparisonRow]] = None,
    metrics: Optional[list[ReportMetrics]] = None,
) -> str:
    """A few sentences on who leads where. Players are numbered from 1."""
    if len(reports) < 2:
        return NOT_ENOUGH_REPORTS

    rows = rows if rows is not None else _build_rows(reports)
    metrics = metrics if metrics is not None else [build_metrics(r) for r in reports]
    parts = []

    best_avg = max(range(len(metrics)), key=lambda i: metrics[i].average_attribute)
    parts.append(
        f"Player {best_avg + 1} has the highest average scouted attributes "
        f"({metrics[best_avg].average_attribute:.1f})."
    )

    wins = [0] * len(reports)
    for row in rows:
        if row.best > 0:
            wins[row.best_index] += 1
    dominant = wins.index(max(wins))
    parts.append(f"Player {dominant + 1} leads in {wins[dominant]} of {len(rows)} assessed attributes.")

    priced = [(m.estimated_value, i) for i, m in enumerate(metrics) if m.estimated_value > 0]
    if priced:
        cheapest_value, cheapest = min(priced)
        parts.append(
            f"Player {cheapest + 1} is the most affordable option at an estimated "
            f"value of {_format_value(cheapest_value)}."
        )

    strongest = max(range(len(metrics)), key=lambda i: metrics[i].conviction.rank)
    parts.append(
        f"Player {strongest + 1} carries the highest conviction level: "
        f"{CONVICTION_LABELS[metrics[strongest].conviction]}."
    )
    return " ".join(parts)


def calculate_value_score(report: ScoutReport, transfer_fee: float) -> Optional[int]:
    """
    Value for money, 0-100.

    Perceived quality is discounted by fee on a log scale between 100k
    and 100M. None for a free transfer or an empty report.
    """
    if transfer_fee <= 0 or not report.attribute_assessments:
        return None

    quality = (_average_estimate(report.attribute_assessments) - 1) / 19 * 100
    cost_pressure = min(1.0, (math.log10(max(100_000, transfer_fee)) - 5) / 3)
    return int(clamp(round_half_up(quality * (1 - cost_pressure * 0.6)), 0, 100))


def calculate_position_fit(
    report: ScoutReport,
    position: Position,
    style: Optional[TacticalStyle] = None,
) -> int:
    """
    Fit for a target position, 0-100, with up to 20 points for style.

    Key attributes score (value - 5) / 15 each, averaged and scaled to 80;
    with none assessed the base is 40. Nothing to go on at all scores 50.
    """
    key_attributes = [a.name for a in AttributeRegistry.get_for_position(position.value)]
    if not key_attributes or not report.attribute_assessments:
        return 50

    key_scores = [
        max(0.0, (assessment.estimated_value - 5) / 15)
        for assessment in map(report.get_assessment, key_attributes)
        if assessment is not None
    ]
    base_fit = mean(key_scores) * 80 if key_scores else 40

    style_bonus = 0.0
    if style is not None:
        style_scores = [
            max(0.0, (assessment.estimated_value - 10) / 10)
            for assessment in map(report.get_assessment, STYLE_ATTRIBUTES[style])
            if assessment is not None
        ]
        style_bonus = mean(style_scores) * 20

    return int(clamp(round_half_up(base_fit + style_bonus), 0, 100))
