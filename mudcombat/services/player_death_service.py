"""
Player Death Service for the killed lifecycle event.

Announces the death, restores the victim, relocates them to their home
waypoint (or the configured starting room) and, once placement completes,
applies the experience penalty and persists the result.

The relocation is the only suspension point. Health is restored before it
so the victim never arrives dead; the penalty and save run strictly after
it, exactly once per death.
"""

from typing import Any

from ..config.models import GameConfig
from ..events import CharacterKilledEvent
from ..exceptions import RespawnLocationError, create_error_context
from ..game.level_curve import death_experience_penalty
from ..game.movement_service import MovementService
from ..game.world import WorldRegistry
from ..models.character import HEALTH, Character
from ..models.room import Room
from ..realtime.broadcast import Broadcaster
from ..realtime.session import SessionManager
from ..structured_logging.enhanced_logging_config import get_logger, log_exception_once
from .combat_messaging_service import CombatMessagingService
from .combat_prompt import COMBAT_PROMPT
from .interfaces import CharacterPersistence, CommandDispatcher

HOME_WAYPOINT_KEY = "waypoint.home"


class PlayerDeathService:
    """
    Service for the player death transition.

    This service handles:
    - Removing the combat prompt from the victim's session
    - Announcing the death to the room and the victim's party
    - Restoring health and relocating the victim
    - Applying the experience penalty and saving after relocation
    """

    def __init__(
        self,
        world: WorldRegistry,
        sessions: SessionManager,
        broadcaster: Broadcaster,
        movement: MovementService,
        commands: CommandDispatcher,
        persistence: CharacterPersistence,
        messaging: CombatMessagingService,
        config: GameConfig,
        logger: Any = None,
    ) -> None:
        """
        Initialize the player death service.

        Args:
            world: Registry used to resolve characters and rooms
            sessions: Live sessions, for prompt removal
            broadcaster: Output to characters, rooms and parties
            movement: Relocation primitive
            commands: Command dispatcher used to run ``look`` after respawn
            persistence: Character persistence for the post-death save
            messaging: Narration formatter
            config: Game configuration providing the starting room
            logger: Optional bound logger (defaults to the module logger)
        """
        self._world = world
        self._sessions = sessions
        self._broadcaster = broadcaster
        self._movement = movement
        self._commands = commands
        self._persistence = persistence
        self._messaging = messaging
        self._penalty_percent = config.death_experience_penalty_percent
        self._logger = logger or get_logger(__name__)

        self.starting_room_id = config.starting_room
        if not self.starting_room_id:
            self._logger.error("No starting room configured; set GAME_STARTING_ROOM")

        self._logger.info(
            "PlayerDeathService initialized",
            starting_room=self.starting_room_id,
            penalty_percent=self._penalty_percent,
        )

    def resolve_respawn_room(self, victim: Character) -> Room | None:
        """The victim's home waypoint room if it resolves, else the starting room."""
        home = self._world.get_room(victim.get_meta(HOME_WAYPOINT_KEY))
        if home is not None:
            return home
        return self._world.get_room(self.starting_room_id)

    async def handle_killed(self, event: CharacterKilledEvent) -> None:
        """
        Run the death transition for the actor.

        Raises:
            RespawnLocationError: If no respawn room can be resolved; the
                victim is left in place with health restored and no penalty
        """
        victim = self._world.get_character(event.actor_id)
        if victim is None:
            self._logger.warning("Killed event for unknown character", character_id=event.actor_id)
            return
        if victim.is_npc:
            self._logger.debug("Killed event for NPC left to the NPC layer", character_id=victim.character_id)
            return
        killer = self._world.get_character(event.killer_id)

        session = self._sessions.get(victim.character_id)
        if session is not None:
            session.remove_prompt(COMBAT_PROMPT)

        excluded = [victim.character_id]
        if killer is not None:
            excluded.append(killer.character_id)
        self._broadcaster.say_at_except(victim.room_id, self._messaging.death_for_room(victim, killer), excluded)

        party = self._world.party_of(victim)
        if party is not None:
            self._broadcaster.say_at_party(party, self._messaging.death_for_party(victim))

        victim.set_attribute_to_max(HEALTH)

        destination = self.resolve_respawn_room(victim)
        if destination is None:
            raise RespawnLocationError(
                "No respawn room could be resolved",
                context=create_error_context(
                    character_id=victim.character_id, room_id=victim.room_id, event_kind=str(event.kind)
                ),
                home_room_id=victim.get_meta(HOME_WAYPOINT_KEY),
                starting_room_id=self.starting_room_id,
            )

        self._logger.info(
            "Character died",
            character_id=victim.character_id,
            death_room=victim.room_id,
            killer_id=killer.character_id if killer is not None else None,
            respawn_room=destination.room_id,
        )

        await self._movement.move_character(victim, destination)
        self._after_respawn(victim, killer)

    def _after_respawn(self, victim: Character, killer: Character | None) -> None:
        """Continuation of the death transition once the victim is placed."""
        self._commands.execute("look", victim)

        self._broadcaster.say_at(victim, self._messaging.respawn_flavor())
        if killer is not None and killer.character_id != victim.character_id:
            self._broadcaster.say_at(victim, self._messaging.killed_by(killer))

        lost = death_experience_penalty(victim.experience, self._penalty_percent)
        victim.experience -= lost
        try:
            self._persistence.save_character(victim)
        except Exception as e:
            log_exception_once(
                self._logger,
                "error",
                "Failed to save character after death",
                exc=e,
                character_id=victim.character_id,
                exc_info=True,
            )
            raise
        self._logger.info(
            "Death experience penalty applied",
            character_id=victim.character_id,
            experience_lost=lost,
            experience=victim.experience,
        )
        self._broadcaster.say_at(victim, self._messaging.experience_lost(lost))

        self._broadcaster.prompt(victim)
