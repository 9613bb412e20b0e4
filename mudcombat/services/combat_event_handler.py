"""
Combat event handler: narration for hits and heals.

Handles the hit, heal, damaged and healed lifecycle events. Each handler is
a stateless reaction: it narrates to the character the event was delivered
to, fans a third-person variant out to co-located party members, and (for
damage that drops health to zero) hands over to the death transition.
Hidden effects are never narrated to anyone. NPC deaths are left to the NPC
layer; only players enter the death transition.
"""

from typing import Any

from ..events import (
    CharacterDamagedEvent,
    CharacterHealedEvent,
    CharacterHealEvent,
    CharacterHitEvent,
    CharacterKilledEvent,
    WeaponHitEvent,
)
from ..game.world import WorldRegistry
from ..models.character import HEALTH, Character
from ..realtime.broadcast import Broadcaster
from ..realtime.party_broadcaster import PartyBroadcaster
from ..structured_logging.enhanced_logging_config import get_logger
from .combat_messaging_service import CombatMessagingService
from .interfaces import EventDispatcher


class CombatEventHandler:
    """Narrates completed hits and heals."""

    def __init__(
        self,
        world: WorldRegistry,
        dispatch: EventDispatcher,
        broadcaster: Broadcaster,
        party_broadcaster: PartyBroadcaster,
        messaging: CombatMessagingService,
        logger: Any = None,
    ) -> None:
        """
        Initialize the combat event handler.

        Args:
            world: Registry used to resolve characters referenced by events
            dispatch: Delivers the weapon hit and killed follow-up events
            broadcaster: Output to individual characters
            party_broadcaster: Output to co-located party members
            messaging: Narration formatter
            logger: Optional bound logger (defaults to the module logger)
        """
        self._world = world
        self._dispatch = dispatch
        self._broadcaster = broadcaster
        self._party_broadcaster = party_broadcaster
        self._messaging = messaging
        self._logger = logger or get_logger(__name__)

    def _resolve(self, character_id: str | None, role: str, event_type: str) -> Character | None:
        character = self._world.get_character(character_id)
        if character is None and character_id is not None:
            self._logger.warning(
                "Character referenced by combat event not found",
                character_id=character_id,
                role=role,
                event_type=event_type,
            )
        return character

    async def handle_hit(self, event: CharacterHitEvent) -> None:
        """The actor landed a hit on a target."""
        damage = event.damage
        if damage.hidden:
            return

        actor = self._resolve(event.actor_id, "actor", event.event_type)
        target = self._resolve(event.target_id, "target", event.event_type)
        if actor is None or target is None:
            return

        self._broadcaster.say_at(
            actor, self._messaging.hit_for_attacker(damage, actor, target, event.final_amount)
        )

        weapon = actor.wielded()
        if weapon is not None:
            await self._dispatch(
                WeaponHitEvent(
                    item_id=weapon.item_id,
                    wielder_id=actor.character_id,
                    damage=damage,
                    target_id=target.character_id,
                    final_amount=event.final_amount,
                )
            )

        self._party_broadcaster.broadcast(
            actor, lambda _member: self._messaging.hit_for_witness(damage, actor, target, event.final_amount)
        )

    async def handle_heal(self, event: CharacterHealEvent) -> None:
        """The actor healed a target, possibly themself."""
        heal = event.heal
        if heal.hidden:
            return

        caster = self._resolve(event.actor_id, "actor", event.event_type)
        target = self._resolve(event.target_id, "target", event.event_type)
        if caster is None or target is None:
            return

        # Healing yourself is narrated by the healed event instead
        if target.character_id != caster.character_id:
            self._broadcaster.say_at(
                caster, self._messaging.heal_for_caster(heal, caster, target, event.final_amount)
            )

        self._party_broadcaster.broadcast(
            caster, lambda _member: self._messaging.heal_for_witness(heal, caster, target, event.final_amount)
        )

    async def handle_damaged(self, event: CharacterDamagedEvent) -> None:
        """The actor took damage; a drop to zero health starts the death transition."""
        damage = event.damage
        if damage.hidden or not damage.affects_health():
            return

        victim = self._resolve(event.actor_id, "actor", event.event_type)
        if victim is None:
            return
        attacker = self._resolve(damage.attacker_id, "attacker", event.event_type)

        self._broadcaster.say_at(victim, self._messaging.damaged_for_victim(damage, attacker, event.final_amount))
        self._party_broadcaster.broadcast(
            victim, lambda _member: self._messaging.damaged_for_witness(damage, attacker, victim, event.final_amount)
        )

        if victim.get_attribute(HEALTH) <= 0 and not victim.is_npc:
            self._logger.info(
                "Character health depleted",
                character_id=victim.character_id,
                attacker_id=damage.attacker_id,
            )
            await self._dispatch(
                CharacterKilledEvent(
                    actor_id=victim.character_id,
                    killer_id=attacker.character_id if attacker is not None else None,
                )
            )

    async def handle_healed(self, event: CharacterHealedEvent) -> None:
        """The actor received a heal; only health heals are shown to the party."""
        heal = event.heal
        if heal.hidden:
            return

        recipient = self._resolve(event.actor_id, "actor", event.event_type)
        if recipient is None:
            return
        healer = self._resolve(heal.attacker_id, "attacker", event.event_type)

        self._broadcaster.say_at(
            recipient, self._messaging.healed_for_recipient(heal, healer, recipient, event.final_amount)
        )

        if not heal.affects_health():
            return

        self._party_broadcaster.broadcast(
            recipient,
            lambda _member: self._messaging.healed_for_witness(heal, healer, recipient, event.final_amount),
        )
