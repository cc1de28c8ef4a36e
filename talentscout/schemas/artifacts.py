"""
Pydantic schemas for assessment artifacts.

These are the outbound shapes of reports, hypotheses, predictions,
profiles, anomalies and analyst output. They also round-trip, so a saved
snapshot can be loaded back into engine models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from talentscout.core.attributes import AttributeDomain
from talentscout.core.scouting import (
    AnalystFocus,
    AnalystReport,
    AnomalyDirection,
    AnomalyFlag,
    ConvictionLevel,
    DataAnalyst,
    EvidenceDirection,
    EvidenceStrength,
    Hypothesis,
    HypothesisState,
    Prediction,
    PredictionType,
    ScoutReport,
    Stat,
    StatisticalProfile,
    Trend,
)


# =============================================================================
# Reports
# =============================================================================

class AttributeAssessmentSchema(BaseModel):
    attribute: str
    estimated_value: int = Field(..., ge=1, le=20)
    confidence_range: tuple[int, int]
    domain: AttributeDomain
    observation_count: int = 0


class ScoutReportSchema(BaseModel):
    """A submitted scouting report."""

    id: str
    player_id: str
    scout_id: str
    submitted_week: int
    submitted_season: int
    attribute_assessments: list[AttributeAssessmentSchema] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    conviction: ConvictionLevel = ConvictionLevel.NOTE
    summary: str = ""
    estimated_value: int = Field(0, description="Perceived market value, rounded to 50k")
    quality_score: int = Field(0, ge=0, le=100, description="0 until scored by the engine")
    perceived_ca_stars: Optional[float] = None
    perceived_pa_range: Optional[tuple[float, float]] = None
    statistical_highlights: list[str] = Field(default_factory=list)

    @classmethod
    def from_model(cls, report: ScoutReport) -> "ScoutReportSchema":
        """Create from ScoutReport model."""
        return cls.model_validate(report.to_dict())

    def to_model(self) -> ScoutReport:
        return ScoutReport.from_dict(self.model_dump(mode="json"))


# =============================================================================
# Hypotheses
# =============================================================================

class HypothesisEvidenceSchema(BaseModel):
    week: int
    description: str = ""
    direction: EvidenceDirection
    strength: EvidenceStrength


class HypothesisSchema(BaseModel):
    """An investigative question and the evidence gathered so far."""

    id: str
    player_id: str
    player_name: str = ""
    text: str = ""
    domain: AttributeDomain
    state: HypothesisState = HypothesisState.OPEN
    evidence: list[HypothesisEvidenceSchema] = Field(default_factory=list)
    created_week: int = 1
    resolved_week: Optional[int] = Field(None, description="Set once confirmed or debunked")

    @classmethod
    def from_model(cls, hypothesis: Hypothesis) -> "HypothesisSchema":
        return cls.model_validate(hypothesis.to_dict())

    def to_model(self) -> Hypothesis:
        return Hypothesis.from_dict(self.model_dump(mode="json"))


# =============================================================================
# Predictions
# =============================================================================

class PredictionSchema(BaseModel):
    """A falsifiable claim about a player's future."""

    id: str
    scout_id: str
    player_id: str
    type: PredictionType
    statement: str = ""
    confidence: float = Field(..., ge=0.0, le=1.0)
    made_in_season: int
    made_in_week: int
    resolve_by_season: int
    resolved: bool = False
    was_correct: Optional[bool] = None

    @classmethod
    def from_model(cls, prediction: Prediction) -> "PredictionSchema":
        return cls.model_validate(prediction.to_dict())

    def to_model(self) -> Prediction:
        return Prediction.from_dict(self.model_dump(mode="json"))


# =============================================================================
# Statistics
# =============================================================================

class StatisticalProfileSchema(BaseModel):
    """A scout's perceived statistical picture of a player."""

    player_id: str
    season: int
    per_90: dict[Stat, float] = Field(default_factory=dict)
    percentiles: dict[Stat, int] = Field(
        default_factory=dict, description="0-100 rank among same-position peers"
    )
    trends: dict[Stat, Trend] = Field(default_factory=dict)
    last_updated_week: int = 1

    @classmethod
    def from_model(cls, profile: StatisticalProfile) -> "StatisticalProfileSchema":
        return cls.model_validate(profile.to_dict())

    def to_model(self) -> StatisticalProfile:
        return StatisticalProfile.from_dict(self.model_dump(mode="json"))


class AnomalyFlagSchema(BaseModel):
    """A statistical outlier flagged by a briefing or an analyst."""

    id: str
    player_id: str
    stat: Stat
    direction: AnomalyDirection
    severity: float = Field(..., ge=0.0, description="Perceived z-score, one decimal")
    description: str = ""
    week: int
    season: int
    investigated: bool = False

    @classmethod
    def from_model(cls, flag: AnomalyFlag) -> "AnomalyFlagSchema":
        return cls.model_validate(flag.to_dict())

    def to_model(self) -> AnomalyFlag:
        return AnomalyFlag.from_dict(self.model_dump(mode="json"))


# =============================================================================
# Analytics Department
# =============================================================================

class DataAnalystSchema(BaseModel):
    """An analyst on the department payroll."""

    id: str
    name: str = ""
    skill: int = Field(8, ge=1, le=20)
    focus: AnalystFocus = AnalystFocus.GENERAL
    morale: int = Field(70, ge=0, le=100)
    tenure_weeks: int = 0
    weekly_salary: int = Field(50, description="Weekly wage, 50 + 30 per skill point at hire")
    assigned_league_id: Optional[str] = None

    @classmethod
    def from_model(cls, analyst: DataAnalyst) -> "DataAnalystSchema":
        return cls.model_validate(analyst.to_dict())

    def to_model(self) -> DataAnalyst:
        return DataAnalyst.from_dict(self.model_dump(mode="json"))


class AnalystReportSchema(BaseModel):
    """One analyst's weekly output for one league."""

    id: str
    analyst_id: str
    league_id: str
    highlights: list[str] = Field(default_factory=list, description="Highlighted player ids")
    anomalies: list[AnomalyFlagSchema] = Field(default_factory=list)
    quality: int = Field(0, ge=0, le=100)
    week: int = 0
    season: int = 0

    @classmethod
    def from_model(cls, report: AnalystReport) -> "AnalystReportSchema":
        return cls.model_validate(report.to_dict())

    def to_model(self) -> AnalystReport:
        return AnalystReport.from_dict(self.model_dump(mode="json"))
