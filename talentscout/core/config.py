"""
Assessment engine configuration.

Tuning constants shared by the scouting modules. The engine reads no
environment variables; callers override values with set_config().
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AssessmentConfig:
    """Tuning constants for the scouting assessment engine."""

    # Comparison bench
    bench_max_size: int = 8

    # Hypothesis generation and evidence
    hypothesis_trigger_chance: float = 0.3
    min_moments_for_hypothesis: int = 2
    strong_evidence_weight: float = 2.0
    moderate_evidence_weight: float = 1.0
    weak_evidence_weight: float = 0.5
    confirmed_insight_bonus: int = 5
    debunked_insight_bonus: int = 2

    # Report market value curve
    market_value_base: int = 2_000_000
    market_value_exponent: float = 3.5
    market_value_rounding: int = 50_000

    # Prediction tracker
    oracle_accuracy: float = 0.70
    oracle_min_resolved: int = 10
    max_prediction_suggestions: int = 3

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.bench_max_size < 1:
            errors.append("bench_max_size must be at least 1")
        if not 0.0 <= self.hypothesis_trigger_chance <= 1.0:
            errors.append("hypothesis_trigger_chance must be between 0 and 1")
        if self.min_moments_for_hypothesis < 1:
            errors.append("min_moments_for_hypothesis must be at least 1")
        if not 0.0 <= self.oracle_accuracy <= 1.0:
            errors.append("oracle_accuracy must be between 0 and 1")
        if self.max_prediction_suggestions < 0:
            errors.append("max_prediction_suggestions must not be negative")
        return errors


# Singleton config instance
_config: Optional[AssessmentConfig] = None


def get_config() -> AssessmentConfig:
    """Get the global assessment configuration."""
    global _config
    if _config is None:
        _config = AssessmentConfig()
    return _config


def set_config(config: AssessmentConfig) -> None:
    """Set the global assessment configuration."""
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid assessment config: {'; '.join(errors)}")
    global _config
    _config = config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = None
