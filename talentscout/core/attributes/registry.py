"""Attribute registry and player attribute container."""

from dataclasses import dataclass, field
from typing import Iterator

from talentscout.core.attributes.base import (
    ALL_ATTRIBUTES,
    AttributeDefinition,
    AttributeDomain,
)


class AttributeRegistry:
    """
    Central registry for all attribute definitions.

    This is a singleton-style class that holds all registered attributes.
    Attributes are registered at module load time from base.py.
    """

    _attributes: dict[str, AttributeDefinition] = {}
    _initialized: bool = False

    @classmethod
    def initialize(cls) -> None:
        """Initialize registry with default attributes."""
        if cls._initialized:
            return
        for attr in ALL_ATTRIBUTES:
            cls.register(attr)
        cls._initialized = True

    @classmethod
    def register(cls, attr_def: AttributeDefinition) -> None:
        """Register an attribute definition."""
        cls._attributes[attr_def.name] = attr_def

    @classmethod
    def get(cls, name: str) -> AttributeDefinition:
        """Get an attribute definition by name."""
        cls.initialize()
        if name not in cls._attributes:
            raise KeyError(f"Unknown attribute: {name}")
        return cls._attributes[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        cls.initialize()
        return name in cls._attributes

    @classmethod
    def get_all(cls) -> list[AttributeDefinition]:
        """Get all registered attributes."""
        cls.initialize()
        return list(cls._attributes.values())

    @classmethod
    def all_names(cls) -> list[str]:
        """Get all registered attribute names in registration order."""
        cls.initialize()
        return list(cls._attributes)

    @classmethod
    def get_by_domain(cls, domain: AttributeDomain) -> list[AttributeDefinition]:
        """Get all attributes in a domain."""
        cls.initialize()
        return [a for a in cls._attributes.values() if a.domain == domain]

    @classmethod
    def domain_of(cls, name: str) -> AttributeDomain:
        """Get the domain an attribute belongs to."""
        return cls.get(name).domain

    @classmethod
    def get_for_position(cls, position: str) -> list[AttributeDefinition]:
        """
        Get the key attributes for a position, sorted by weight.

        Returns attributes that have a non-zero weight for the given position.
        """
        cls.initialize()
        relevant = [
            (a, a.position_weights.get(position, 0.0)) for a in cls._attributes.values()
        ]
        return [a for a, w in sorted(relevant, key=lambda x: -x[1]) if w > 0]


@dataclass
class PlayerAttributes:
    """
    Container for a player's true attribute values.

    Sparse: attributes that were never set read as the registry default (10).
    """

    _values: dict[str, int] = field(default_factory=dict)

    def get(self, attr_name: str, default: int = 10) -> int:
        """Get an attribute value, defaulting to 10 if not set."""
        return self._values.get(attr_name, default)

    def set(self, attr_name: str, value: int) -> None:
        """Set an attribute value, clamping to valid range."""
        attr_def = AttributeRegistry.get(attr_name)
        self._values[attr_name] = attr_def.clamp(value)

    def __getitem__(self, attr_name: str) -> int:
        """Allow dict-like access: attrs['pace']."""
        return self.get(attr_name)

    def __setitem__(self, attr_name: str, value: int) -> None:
        """Allow dict-like assignment: attrs['pace'] = 15."""
        self.set(attr_name, value)

    def __contains__(self, attr_name: object) -> bool:
        return attr_name in self._values

    def __iter__(self) -> Iterator[str]:
        """Iterate over attribute names."""
        return iter(self._values)

    def __len__(self) -> int:
        """Number of set attributes."""
        return len(self._values)

    def items(self) -> Iterator[tuple[str, int]]:
        """Iterate over (name, value) pairs."""
        return iter(self._values.items())

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return dict(self._values)

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> "PlayerAttributes":
        """Create from dictionary."""
        attrs = cls()
        for name, value in data.items():
            attrs.set(name, value)
        return attrs
