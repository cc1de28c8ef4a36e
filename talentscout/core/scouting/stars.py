"""
Star ratings.

Current and potential ability live on a hidden 1-200 scale; scouts and
the UI only ever see half-star ratings from 0.5 to 5.0.
"""

from talentscout.core.numeric import clamp, round_half_up, round_to_half


MIN_ABILITY = 1
MAX_ABILITY = 200
MIN_STARS = 0.5
MAX_STARS = 5.0


def ability_to_stars(ability: float) -> float:
    """Convert a 1-200 ability to a 0.5-5.0 star rating in half-star steps."""
    ability = clamp(ability, MIN_ABILITY, MAX_ABILITY)
    stars = MIN_STARS + (ability - MIN_ABILITY) / (MAX_ABILITY - MIN_ABILITY) * (
        MAX_STARS - MIN_STARS
    )
    return round_to_half(stars)


def stars_to_ability(stars: float) -> int:
    """Convert a star rating back to the 1-200 ability scale."""
    stars = clamp(stars, MIN_STARS, MAX_STARS)
    ability = (stars - MIN_STARS) / (MAX_STARS - MIN_STARS) * (
        MAX_ABILITY - MIN_ABILITY
    ) + MIN_ABILITY
    return round_half_up(ability)
