"""Game enumerations."""

from talentscout.core.enums.positions import Position

__all__ = [
    "Position",
]
