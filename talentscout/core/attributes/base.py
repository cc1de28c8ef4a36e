"""Base attribute definitions."""

from dataclasses import dataclass, field
from enum import Enum


class AttributeDomain(str, Enum):
    """Domains that group player attributes for comparisons and hypotheses."""

    TECHNICAL = "technical"
    PHYSICAL = "physical"
    MENTAL = "mental"
    TACTICAL = "tactical"
    HIDDEN = "hidden"  # Never shown directly, only inferred


@dataclass(frozen=True)
class AttributeDefinition:
    """
    Defines an attribute type (not a value).

    Attributes are defined once and registered globally.
    Each player then has a hidden true value for these attributes,
    and each scout a perceived one.
    """

    name: str
    domain: AttributeDomain
    abbreviation: str
    description: str = ""
    min_value: int = 1
    max_value: int = 20
    default_value: int = 10

    # Key positions for this attribute (0.0-1.0)
    position_weights: dict[str, float] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeDefinition):
            return NotImplemented
        return self.name == other.name

    def clamp(self, value: int) -> int:
        """Clamp a value to valid range."""
        return max(self.min_value, min(self.max_value, value))


# ============================================================================
# Technical Attributes
# ============================================================================

FIRST_TOUCH = AttributeDefinition(
    name="first_touch",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="FTC",
    description="Control of the ball on receiving it",
    position_weights={"CM": 1.0, "CAM": 1.0, "ST": 1.0},
)

PASSING = AttributeDefinition(
    name="passing",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="PAS",
    description="Range and accuracy of distribution",
    position_weights={"CDM": 1.0, "CM": 1.0, "CAM": 1.0},
)

DRIBBLING = AttributeDefinition(
    name="dribbling",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="DRI",
    description="Running with the ball under close control",
    position_weights={"CAM": 1.0, "LW": 1.0, "RW": 1.0},
)

CROSSING = AttributeDefinition(
    name="crossing",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="CRO",
    description="Delivery from wide areas",
    position_weights={"LB": 1.0, "RB": 1.0, "LW": 1.0, "RW": 1.0},
)

SHOOTING = AttributeDefinition(
    name="shooting",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="SHO",
    description="Striking the ball at goal",
    position_weights={"CAM": 1.0, "LW": 1.0, "RW": 1.0, "ST": 1.0},
)

HEADING = AttributeDefinition(
    name="heading",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="HEA",
    description="Accuracy and power in the air",
    position_weights={"CB": 1.0, "ST": 1.0},
)

TACKLING = AttributeDefinition(
    name="tackling",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="TCK",
    description="Winning the ball cleanly",
    position_weights={"CB": 1.0, "LB": 1.0, "RB": 1.0, "CDM": 1.0},
)

FINISHING = AttributeDefinition(
    name="finishing",
    domain=AttributeDomain.TECHNICAL,
    abbreviation="FIN",
    description="Converting chances inside the box",
    position_weights={"LW": 1.0, "RW": 1.0, "ST": 1.0},
)

# ============================================================================
# Physical Attributes
# ============================================================================

PACE = AttributeDefinition(
    name="pace",
    domain=AttributeDomain.PHYSICAL,
    abbreviation="PAC",
    description="Top running speed",
    position_weights={"LB": 1.0, "RB": 1.0, "LW": 1.0, "RW": 1.0},
)

STRENGTH = AttributeDefinition(
    name="strength",
    domain=AttributeDomain.PHYSICAL,
    abbreviation="STR",
    description="Raw physical power in duels",
    position_weights={"CB": 1.0, "CDM": 1.0, "ST": 1.0},
)

STAMINA = AttributeDefinition(
    name="stamina",
    domain=AttributeDomain.PHYSICAL,
    abbreviation="STA",
    description="Ability to sustain effort for ninety minutes",
    position_weights={"LB": 1.0, "RB": 1.0, "CDM": 1.0, "CM": 1.0},
)

AGILITY = AttributeDefinition(
    name="agility",
    domain=AttributeDomain.PHYSICAL,
    abbreviation="AGI",
    description="Quickness in changing direction",
    position_weights={"LW": 1.0, "RW": 1.0},
)

JUMPING = AttributeDefinition(
    name="jumping",
    domain=AttributeDomain.PHYSICAL,
    abbreviation="JUM",
    description="Vertical reach",
    position_weights={"CB": 1.0},
)

BALANCE = AttributeDefinition(
    name="balance",
    domain=AttributeDomain.PHYSICAL,
    abbreviation="BAL",
    description="Staying on your feet under contact",
)

# ============================================================================
# Mental Attributes
# ============================================================================

COMPOSURE = AttributeDefinition(
    name="composure",
    domain=AttributeDomain.MENTAL,
    abbreviation="CMP",
    description="Calmness with the ball under pressure",
    position_weights={"GK": 1.0, "CAM": 1.0, "ST": 1.0},
)

POSITIONING = AttributeDefinition(
    name="positioning",
    domain=AttributeDomain.MENTAL,
    abbreviation="POS",
    description="Taking up the right position",
    position_weights={"GK": 1.0, "CB": 1.0, "ST": 1.0},
)

WORK_RATE = AttributeDefinition(
    name="work_rate",
    domain=AttributeDomain.MENTAL,
    abbreviation="WOR",
    description="Willingness to run for the team",
    position_weights={"CM": 1.0},
)

DECISION_MAKING = AttributeDefinition(
    name="decision_making",
    domain=AttributeDomain.MENTAL,
    abbreviation="DEC",
    description="Choosing the right option",
    position_weights={"GK": 1.0},
)

LEADERSHIP = AttributeDefinition(
    name="leadership",
    domain=AttributeDomain.MENTAL,
    abbreviation="LEA",
    description="Organising and lifting team-mates",
    position_weights={"GK": 1.0},
)

ANTICIPATION = AttributeDefinition(
    name="anticipation",
    domain=AttributeDomain.MENTAL,
    abbreviation="ANT",
    description="Reading what happens next",
    position_weights={"GK": 1.0},
)

VISION = AttributeDefinition(
    name="vision",
    domain=AttributeDomain.MENTAL,
    abbreviation="VIS",
    description="Seeing passes others do not",
    position_weights={"CM": 1.0, "CAM": 1.0},
)

# ============================================================================
# Tactical Attributes
# ============================================================================

OFF_THE_BALL = AttributeDefinition(
    name="off_the_ball",
    domain=AttributeDomain.TACTICAL,
    abbreviation="OTB",
    description="Movement into space without the ball",
    position_weights={"CM": 1.0, "CAM": 1.0, "LW": 1.0, "RW": 1.0, "ST": 1.0},
)

PRESSING = AttributeDefinition(
    name="pressing",
    domain=AttributeDomain.TACTICAL,
    abbreviation="PRS",
    description="Closing down opponents as a unit",
    position_weights={"LB": 1.0, "RB": 1.0, "CDM": 1.0, "CM": 1.0},
)

DEFENSIVE_AWARENESS = AttributeDefinition(
    name="defensive_awareness",
    domain=AttributeDomain.TACTICAL,
    abbreviation="DEF",
    description="Sensing danger and covering space",
    position_weights={"CB": 1.0, "LB": 1.0, "RB": 1.0, "CDM": 1.0},
)

MARKING = AttributeDefinition(
    name="marking",
    domain=AttributeDomain.TACTICAL,
    abbreviation="MAR",
    description="Tracking an assigned opponent",
    position_weights={"CB": 1.0, "CDM": 1.0},
)

TEAMWORK = AttributeDefinition(
    name="teamwork",
    domain=AttributeDomain.TACTICAL,
    abbreviation="TEA",
    description="Following the collective plan",
    position_weights={"LB": 1.0, "RB": 1.0, "CDM": 1.0, "CM": 1.0},
)

# ============================================================================
# Hidden Attributes
# ============================================================================

INJURY_PRONENESS = AttributeDefinition(
    name="injury_proneness",
    domain=AttributeDomain.HIDDEN,
    abbreviation="INJ",
    description="Likelihood of picking up injuries (higher is worse)",
)

CONSISTENCY = AttributeDefinition(
    name="consistency",
    domain=AttributeDomain.HIDDEN,
    abbreviation="CON",
    description="How often the player performs to their level",
)

BIG_GAME_TEMPERAMENT = AttributeDefinition(
    name="big_game_temperament",
    domain=AttributeDomain.HIDDEN,
    abbreviation="BGT",
    description="Performance on the biggest occasions",
)

PROFESSIONALISM = AttributeDefinition(
    name="professionalism",
    domain=AttributeDomain.HIDDEN,
    abbreviation="PRO",
    description="Dedication in training and away from the pitch",
)


ALL_ATTRIBUTES: list[AttributeDefinition] = [
    # Technical
    FIRST_TOUCH,
    PASSING,
    DRIBBLING,
    CROSSING,
    SHOOTING,
    HEADING,
    TACKLING,
    FINISHING,
    # Physical
    PACE,
    STRENGTH,
    STAMINA,
    AGILITY,
    JUMPING,
    BALANCE,
    # Mental
    COMPOSURE,
    POSITIONING,
    WORK_RATE,
    DECISION_MAKING,
    LEADERSHIP,
    ANTICIPATION,
    VISION,
    # Tactical
    OFF_THE_BALL,
    PRESSING,
    DEFENSIVE_AWARENESS,
    MARKING,
    TEAMWORK,
    # Hidden
    INJURY_PRONENESS,
    CONSISTENCY,
    BIG_GAME_TEMPERAMENT,
    PROFESSIONALISM,
]
