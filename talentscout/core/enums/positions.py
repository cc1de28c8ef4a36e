"""Position definitions for football players."""

from enum import Enum


class Position(str, Enum):
    """Individual player positions."""

    GK = "GK"  # Goalkeeper

    # Defence
    CB = "CB"  # Centre Back
    LB = "LB"  # Left Back
    RB = "RB"  # Right Back

    # Midfield
    CDM = "CDM"  # Defensive Midfielder
    CM = "CM"  # Central Midfielder
    CAM = "CAM"  # Attacking Midfielder

    # Attack
    LW = "LW"  # Left Winger
    RW = "RW"  # Right Winger
    ST = "ST"  # Striker
