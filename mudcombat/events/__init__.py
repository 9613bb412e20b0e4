"""
Events module for mudcombat.

Provides the in-memory event bus and the event classes exchanged between the
combat engine and the presentation layer.
"""

from .combat_events import (
    COMBAT_EVENT_TYPES,
    CharacterDamagedEvent,
    CharacterDeathblowEvent,
    CharacterHealedEvent,
    CharacterHealEvent,
    CharacterHitEvent,
    CharacterKilledEvent,
    CombatEvent,
    CombatEventKind,
    CombatTickEvent,
    ExperienceEarnedEvent,
    WeaponHitEvent,
)
from .event_bus import EventBus
from .event_types import BaseEvent, PlayerEnteredRoom, PlayerLeftRoom

__all__ = [
    "COMBAT_EVENT_TYPES",
    "BaseEvent",
    "CharacterDamagedEvent",
    "CharacterDeathblowEvent",
    "CharacterHealEvent",
    "CharacterHealedEvent",
    "CharacterHitEvent",
    "CharacterKilledEvent",
    "CombatEvent",
    "CombatEventKind",
    "CombatTickEvent",
    "EventBus",
    "ExperienceEarnedEvent",
    "PlayerEnteredRoom",
    "PlayerLeftRoom",
    "WeaponHitEvent",
]
