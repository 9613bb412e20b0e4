"""
Movement service for mudcombat.

Relocates characters between rooms. Placement completes asynchronously:
callers await move_character() and treat everything after the await as a
continuation that may interleave with other events on the loop.
"""

import asyncio

from ..events import EventBus, PlayerEnteredRoom, PlayerLeftRoom
from ..models.character import Character
from ..models.room import Room
from ..structured_logging.enhanced_logging_config import get_logger
from .world import WorldRegistry


class MovementService:
    """Relocates characters and announces the move on the event bus."""

    def __init__(self, world: WorldRegistry, event_bus: EventBus | None = None) -> None:
        """
        Initialize the movement service.

        Args:
            world: Registry that owns the character and room records
            event_bus: Optional EventBus instance for movement events
        """
        self._world = world
        self._event_bus = event_bus
        self._logger = get_logger("MovementService")

    async def move_character(self, character: Character, destination: Room) -> None:
        """
        Move a character into the destination room.

        The character leaves its current room first; placement into the
        destination happens on a later turn of the event loop.

        Args:
            character: Character to move
            destination: Room to place the character in

        Raises:
            ValueError: If the destination room is not registered
        """
        if self._world.get_room(destination.room_id) is None:
            self._logger.error("Destination room not registered", room_id=destination.room_id)
            raise ValueError(f"Unknown destination room: {destination.room_id}")

        from_room_id = character.room_id
        if from_room_id is not None and self._event_bus is not None:
            await self._event_bus.dispatch(
                PlayerLeftRoom(player_id=character.character_id, room_id=from_room_id, to_room_id=destination.room_id)
            )

        await asyncio.sleep(0)

        character.room_id = destination.room_id
        self._logger.info(
            "Character moved",
            character_id=character.character_id,
            from_room=from_room_id,
            to_room=destination.room_id,
        )

        if self._event_bus is not None:
            await self._event_bus.dispatch(
                PlayerEnteredRoom(
                    player_id=character.character_id, room_id=destination.room_id, from_room_id=from_room_id
                )
            )
