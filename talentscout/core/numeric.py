"""Numeric helpers shared by the scouting modules."""

import math


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value between min and max."""
    return max(min_val, min(max_val, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3, unlike round())."""
    return math.floor(value + 0.5)


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5 (star ratings)."""
    return round_half_up(value * 2) / 2


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0.0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)
