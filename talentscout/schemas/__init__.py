"""Pydantic schemas for the engine's inbound and outbound models."""

from talentscout.schemas.artifacts import (
    AnalystReportSchema,
    AnomalyFlagSchema,
    AttributeAssessmentSchema,
    DataAnalystSchema,
    HypothesisEvidenceSchema,
    HypothesisSchema,
    PredictionSchema,
    ScoutReportSchema,
    StatisticalProfileSchema,
)
from talentscout.schemas.observation import (
    AbilityReadingSchema,
    AttributeReadingSchema,
    ObservationSchema,
    PlayerMomentSchema,
)
from talentscout.schemas.player import LeagueSchema, PlayerSchema, ScoutSchema

__all__ = [
    # Inbound
    "PlayerSchema",
    "ScoutSchema",
    "LeagueSchema",
    "ObservationSchema",
    "AttributeReadingSchema",
    "AbilityReadingSchema",
    "PlayerMomentSchema",
    # Outbound
    "ScoutReportSchema",
    "AttributeAssessmentSchema",
    "HypothesisSchema",
    "HypothesisEvidenceSchema",
    "PredictionSchema",
    "StatisticalProfileSchema",
    "AnomalyFlagSchema",
    "DataAnalystSchema",
    "AnalystReportSchema",
]
