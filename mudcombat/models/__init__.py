"""Domain models used by the combat presentation layer."""

from .character import HEALTH, Attribute, Character
from .effects import Damage, Effect, EffectMetadata, EffectSource, Heal
from .item import Item
from .party import Party
from .room import Room

__all__ = [
    "HEALTH",
    "Attribute",
    "Character",
    "Damage",
    "Effect",
    "EffectMetadata",
    "EffectSource",
    "Heal",
    "Item",
    "Party",
    "Room",
]
