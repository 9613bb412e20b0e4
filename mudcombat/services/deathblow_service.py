"""
Kill credit for the deathblow lifecycle event.

A solo killer is credited directly. A killer in a party has the deathblow
proxied to every party member in the same room (themself included), so
each of them is credited exactly once and anything else listening for
deathblows (quest progress, for instance) sees every member.
"""

from typing import Any

from ..events import CharacterDeathblowEvent, ExperienceEarnedEvent
from ..game.level_curve import mob_experience
from ..game.world import WorldRegistry
from ..realtime.broadcast import Broadcaster
from ..structured_logging.enhanced_logging_config import get_logger
from .combat_messaging_service import CombatMessagingService
from .interfaces import EventDispatcher


class DeathblowService:
    """Converts kill credit into experience grants."""

    def __init__(
        self,
        world: WorldRegistry,
        dispatch: EventDispatcher,
        broadcaster: Broadcaster,
        messaging: CombatMessagingService,
        logger: Any = None,
    ) -> None:
        self._world = world
        self._dispatch = dispatch
        self._broadcaster = broadcaster
        self._messaging = messaging
        self._logger = logger or get_logger(__name__)

    async def handle_deathblow(self, event: CharacterDeathblowEvent) -> None:
        """Credit the actor, or proxy the credit to their co-located party."""
        actor = self._world.get_character(event.actor_id)
        target = self._world.get_character(event.target_id)
        if actor is None or target is None:
            self._logger.warning(
                "Deathblow references unknown character",
                actor_id=event.actor_id,
                target_id=event.target_id,
            )
            return

        xp = mob_experience(target.level)

        party = self._world.party_of(actor)
        if party is not None and not event.skip_party:
            for member in list(self._world.party_members(party)):
                if member.room_id != actor.room_id:
                    continue
                await self._dispatch(
                    CharacterDeathblowEvent(
                        actor_id=member.character_id, target_id=target.character_id, skip_party=True
                    )
                )
            return

        if not actor.is_npc:
            self._broadcaster.say_at(actor, self._messaging.deathblow(target))

        self._logger.info(
            "Kill credited",
            character_id=actor.character_id,
            target_id=target.character_id,
            experience=xp,
            via_party=event.skip_party,
        )
        await self._dispatch(
            ExperienceEarnedEvent(character_id=actor.character_id, amount=xp, source_id=target.character_id)
        )
