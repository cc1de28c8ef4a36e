"""Player attribute system."""

from talentscout.core.attributes.base import AttributeDefinition, AttributeDomain
from talentscout.core.attributes.registry import AttributeRegistry, PlayerAttributes

__all__ = [
    "AttributeDefinition",
    "AttributeDomain",
    "AttributeRegistry",
    "PlayerAttributes",
]
