"""
Combat-lifecycle events consumed and produced by the presentation layer.

Each event names the character it is delivered to (``actor_id``), the way a
handler would otherwise be invoked on that character. ``kind`` identifies the
lifecycle step and is the key the presentation service registers handlers by.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from ..models.effects import Damage, Heal
from .event_types import BaseEvent


class CombatEventKind(StrEnum):
    """Combat lifecycle steps."""

    UPDATE_TICK = "updateTick"
    HIT = "hit"
    HEAL = "heal"
    DAMAGED = "damaged"
    HEALED = "healed"
    KILLED = "killed"
    DEATHBLOW = "deathblow"


@dataclass
class CombatEvent(BaseEvent):
    """Base class for events delivered to a character."""

    kind: ClassVar[CombatEventKind]

    actor_id: str

    def __post_init__(self) -> None:
        super().__post_init__()
        self.event_type = str(self.kind)


@dataclass
class CombatTickEvent(CombatEvent):
    """Scheduler tick for a character believed to be in combat."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.UPDATE_TICK


@dataclass
class CharacterHitEvent(CombatEvent):
    """The actor dealt damage to a target."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.HIT

    damage: Damage
    target_id: str
    final_amount: int


@dataclass
class CharacterHealEvent(CombatEvent):
    """The actor healed a target (possibly themself)."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.HEAL

    heal: Heal
    target_id: str
    final_amount: int


@dataclass
class CharacterDamagedEvent(CombatEvent):
    """The actor took damage."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.DAMAGED

    damage: Damage
    final_amount: int


@dataclass
class CharacterHealedEvent(CombatEvent):
    """The actor received a heal."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.HEALED

    heal: Heal
    final_amount: int


@dataclass
class CharacterKilledEvent(CombatEvent):
    """The actor died; ``killer_id`` is absent for environmental deaths."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.KILLED

    killer_id: str | None = None


@dataclass
class CharacterDeathblowEvent(CombatEvent):
    """The actor is credited with killing a target."""

    kind: ClassVar[CombatEventKind] = CombatEventKind.DEATHBLOW

    target_id: str
    skip_party: bool = False


@dataclass
class WeaponHitEvent(BaseEvent):
    """Forwarded to a wielded item when its wielder lands a hit."""

    item_id: str
    wielder_id: str
    damage: Damage
    target_id: str
    final_amount: int


@dataclass
class ExperienceEarnedEvent(BaseEvent):
    """Experience granted to a character for a kill."""

    character_id: str
    amount: int
    source_id: str | None = None


COMBAT_EVENT_TYPES: dict[CombatEventKind, type[CombatEvent]] = {
    event_cls.kind: event_cls
    for event_cls in (
        CombatTickEvent,
        CharacterHitEvent,
        CharacterHealEvent,
        CharacterDamagedEvent,
        CharacterHealedEvent,
        CharacterKilledEvent,
        CharacterDeathblowEvent,
    )
}
