"""
Combat presentation service: wires the combat lifecycle handlers.

Builds the narration, tick, death and deathblow handlers from explicit
dependencies and registers one handler per CombatEventKind on the event bus.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from ..config import get_config
from ..config.models import GameConfig
from ..events import COMBAT_EVENT_TYPES, BaseEvent, CombatEvent, CombatEventKind, EventBus
from ..game.movement_service import MovementService
from ..game.world import WorldRegistry
from ..realtime.broadcast import Broadcaster
from ..realtime.party_broadcaster import PartyBroadcaster
from ..realtime.session import SessionManager
from ..structured_logging.enhanced_logging_config import get_logger
from .combat_event_handler import CombatEventHandler
from .combat_messaging_service import CombatMessagingService
from .combat_prompt import CombatPromptBuilder
from .combat_tick_service import CombatTickService
from .deathblow_service import DeathblowService
from .interfaces import CharacterPersistence, CombatEngine, CommandDispatcher
from .player_death_service import PlayerDeathService

CombatHandler = Callable[[Any], Awaitable[None]]


class CombatPresentationService:
    """
    Owns the combat lifecycle handlers and their registration.

    Configuration and the logger are constructor arguments. Without an
    explicit GameConfig the application config is loaded once, here.
    """

    def __init__(
        self,
        world: WorldRegistry,
        event_bus: EventBus,
        sessions: SessionManager,
        engine: CombatEngine,
        commands: CommandDispatcher,
        persistence: CharacterPersistence,
        config: GameConfig | None = None,
        movement: MovementService | None = None,
        logger: Any = None,
    ) -> None:
        self._event_bus = event_bus
        self._logger = logger or get_logger(__name__)
        if config is None:
            config = get_config().game

        self.messaging = CombatMessagingService()
        self.broadcaster = Broadcaster(world, sessions)
        self.party_broadcaster = PartyBroadcaster(world, self.broadcaster)
        self.prompt_builder = CombatPromptBuilder(world, width=config.prompt_width)
        self.movement = movement or MovementService(world, event_bus)

        self.event_handler = CombatEventHandler(
            world, self.dispatch, self.broadcaster, self.party_broadcaster, self.messaging, logger=self._logger
        )
        self.tick_service = CombatTickService(
            world, engine, sessions, self.broadcaster, self.prompt_builder, self.messaging, logger=self._logger
        )
        self.death_service = PlayerDeathService(
            world,
            sessions,
            self.broadcaster,
            self.movement,
            commands,
            persistence,
            self.messaging,
            config,
            logger=self._logger,
        )
        self.deathblow_service = DeathblowService(
            world, self.dispatch, self.broadcaster, self.messaging, logger=self._logger
        )

        self.handlers: dict[CombatEventKind, CombatHandler] = {
            CombatEventKind.UPDATE_TICK: self.tick_service.handle_tick,
            CombatEventKind.HIT: self.event_handler.handle_hit,
            CombatEventKind.HEAL: self.event_handler.handle_heal,
            CombatEventKind.DAMAGED: self.event_handler.handle_damaged,
            CombatEventKind.HEALED: self.event_handler.handle_healed,
            CombatEventKind.KILLED: self.death_service.handle_killed,
            CombatEventKind.DEATHBLOW: self.deathblow_service.handle_deathblow,
        }
        self._registered = False

    def register(self) -> None:
        """Subscribe every handler to its event class on the bus."""
        if self._registered:
            return
        for kind, handler in self.handlers.items():
            self._event_bus.subscribe(COMBAT_EVENT_TYPES[kind], handler)
        self._registered = True
        self._logger.info("Combat presentation handlers registered", kinds=[str(kind) for kind in self.handlers])

    def unregister(self) -> None:
        if not self._registered:
            return
        for kind, handler in self.handlers.items():
            self._event_bus.unsubscribe(COMBAT_EVENT_TYPES[kind], handler)
        self._registered = False

    async def deliver(self, event: CombatEvent) -> None:
        """Run the handler for ``event`` directly, propagating its errors."""
        await self.handlers[event.kind](event)

    async def dispatch(self, event: BaseEvent) -> None:
        """
        Deliver a follow-up event raised by one of the handlers.

        Other subscribers always see the event on the bus. When the handlers
        are not registered there, a combat event is also run through
        deliver() so that deaths and kill credit still happen.
        """
        if not self._registered and isinstance(event, CombatEvent):
            await self.deliver(event)
        await self._event_bus.dispatch(event)
