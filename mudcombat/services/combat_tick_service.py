"""
Combat tick handling.

Invoked once per scheduler tick for every character believed to be in
combat. Drives regeneration and round resolution in the combat engine, then
frames the tick's output and keeps the combat prompt attached while the
character is actively fighting.
"""

from typing import Any

from ..events import CombatTickEvent
from ..exceptions import CombatInvalidTargetError
from ..game.world import WorldRegistry
from ..models.character import Character
from ..realtime.broadcast import Broadcaster
from ..realtime.session import SessionManager
from ..structured_logging.enhanced_logging_config import get_logger
from .combat_messaging_service import CombatMessagingService
from .combat_prompt import COMBAT_PROMPT, CombatPromptBuilder
from .interfaces import CombatEngine


class CombatTickService:
    """Coordinates one combat tick for one character."""

    def __init__(
        self,
        world: WorldRegistry,
        engine: CombatEngine,
        sessions: SessionManager,
        broadcaster: Broadcaster,
        prompt_builder: CombatPromptBuilder,
        messaging: CombatMessagingService,
        logger: Any = None,
    ) -> None:
        self._world = world
        self._engine = engine
        self._sessions = sessions
        self._broadcaster = broadcaster
        self._prompt_builder = prompt_builder
        self._messaging = messaging
        self._logger = logger or get_logger(__name__)

    def _render_prompt(self, character_id: str) -> str:
        actor = self._world.get_character(character_id)
        if actor is None:
            return ""
        return self._prompt_builder.render(actor)

    def _attach_prompt(self, actor: Character) -> None:
        session = self._sessions.get(actor.character_id)
        if session is None or not session.uses_rendered_prompt or session.has_prompt(COMBAT_PROMPT):
            return
        character_id = actor.character_id
        session.add_prompt(COMBAT_PROMPT, lambda: self._render_prompt(character_id))
        self._logger.debug("Combat prompt attached", character_id=actor.character_id)

    async def handle_tick(self, event: CombatTickEvent) -> None:
        """
        Run one combat tick for the actor.

        Raises:
            Exception: Anything the combat engine raises other than
                CombatInvalidTargetError propagates unchanged
        """
        actor = self._world.get_character(event.actor_id)
        if actor is None:
            self._logger.warning("Combat tick for unknown character", character_id=event.actor_id)
            return

        self._engine.start_regeneration(actor)

        had_actions = False
        try:
            had_actions = self._engine.update_round(actor)
        except CombatInvalidTargetError as e:
            self._logger.info(
                "Combat round rejected invalid target",
                character_id=actor.character_id,
                target_id=e.target_id,
            )
            self._broadcaster.say_at(actor, self._messaging.invalid_target())

        if not had_actions:
            return

        self._attach_prompt(actor)

        # Blank line separates this tick's output from the next
        self._broadcaster.say_at(actor, "")
        self._broadcaster.prompt(actor)
