"""
Effect payloads produced by the combat engine.

A Damage or Heal describes one completed combat action. The engine has
already applied mitigation; the post-mitigation magnitude travels next to
the effect on the event as ``final_amount``.
"""

from dataclasses import dataclass, field

from .character import HEALTH, Character
from .item import Item


@dataclass(frozen=True)
class EffectSource:
    """
    The proximate cause of an effect: a character, weapon, spell or hazard.

    ``source_id`` shares the id space of whatever produced the effect, so a
    source created from a character compares equal to that character's id.
    """

    source_id: str
    name: str

    @classmethod
    def from_character(cls, character: Character) -> "EffectSource":
        return cls(source_id=character.character_id, name=character.name)

    @classmethod
    def from_item(cls, item: Item) -> "EffectSource":
        return cls(source_id=item.item_id, name=item.name)


@dataclass(frozen=True)
class EffectMetadata:
    """Presentation flags attached to an effect."""

    hidden: bool = False
    critical: bool = False


@dataclass(frozen=True)
class Effect:
    target_id: str
    source: EffectSource | None = None
    attacker_id: str | None = None
    attribute: str = HEALTH
    metadata: EffectMetadata = field(default_factory=EffectMetadata)

    @property
    def hidden(self) -> bool:
        return self.metadata.hidden

    @property
    def critical(self) -> bool:
        return self.metadata.critical

    def affects_health(self) -> bool:
        return self.attribute == HEALTH

    def source_is(self, character_id: str | None) -> bool:
        """True when the proximate source is the given character."""
        if self.source is None or character_id is None:
            return False
        return self.source.source_id == character_id


@dataclass(frozen=True)
class Damage(Effect):
    """A completed damage effect."""


@dataclass(frozen=True)
class Heal(Effect):
    """A completed heal or resource-restoration effect."""
