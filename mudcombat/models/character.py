"""
Character model for the combat presentation layer.

Characters are created and destroyed by the world layer. Everything a
character points at (its room, its party, the combatants it is fighting) is
held as an identifier and resolved through the WorldRegistry, so a character
never keeps another entity alive.
"""

from dataclasses import dataclass, field
from typing import Any

from .item import Item

HEALTH = "health"


@dataclass
class Attribute:
    """A named numeric pool with a current and maximum value."""

    name: str
    maximum: int
    current: int | None = None

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = self.maximum


@dataclass
class Character:
    """A player or NPC as seen by combat narration and the death flow."""

    character_id: str
    name: str
    room_id: str | None = None
    party_id: str | None = None
    combatant_ids: list[str] = field(default_factory=list)
    attributes: dict[str, Attribute] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)
    equipment: dict[str, Item] = field(default_factory=dict)
    experience: int = 0
    level: int = 1
    is_npc: bool = False

    def is_in_combat(self) -> bool:
        """Return True while the character has at least one active combatant."""
        return bool(self.combatant_ids)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute(self, name: str) -> int:
        """
        Current value of a named attribute.

        Raises:
            KeyError: If the character has no such attribute
        """
        current = self.attributes[name].current
        return current if current is not None else 0

    def get_max_attribute(self, name: str) -> int:
        return self.attributes[name].maximum

    def set_attribute(self, name: str, value: int) -> None:
        self.attributes[name].current = value

    def set_attribute_to_max(self, name: str) -> None:
        attribute = self.attributes[name]
        attribute.current = attribute.maximum

    def get_meta(self, key: str, default: Any = None) -> Any:
        """
        Look up metadata by dotted path, e.g. ``waypoint.home``.

        Returns the default when any segment of the path is missing.
        """
        node: Any = self.metadata
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set_meta(self, key: str, value: Any) -> None:
        """Store metadata by dotted path, creating intermediate mappings."""
        parts = key.split(".")
        node = self.metadata
        for part in parts[:-1]:
            node = node.setdefault(part, {})
        node[parts[-1]] = value

    def wielded(self) -> Item | None:
        """The item in the ``wield`` slot, if any."""
        return self.equipment.get("wield")
