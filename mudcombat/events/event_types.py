"""
Event types for mudcombat.

This module defines the base event class and the room-movement events
published when a character is relocated.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


def _default_timestamp() -> datetime:
    """Factory function for default timestamp."""
    return datetime.now(UTC)


@dataclass
class BaseEvent:
    """
    Base class for all events in the mudcombat system.

    All events inherit from this class and provide a consistent
    interface for event handling and logging.
    """

    timestamp: datetime = field(default_factory=_default_timestamp, init=False)
    event_type: str = field(default="", init=False)

    def __post_init__(self) -> None:
        """Default the event type to the class name."""
        if not self.event_type:
            self.event_type = type(self).__name__


@dataclass
class PlayerEnteredRoom(BaseEvent):
    """
    Event fired when a character enters a room.

    This event is triggered when a character has been placed into
    a new room by the movement service.
    """

    player_id: str
    room_id: str
    from_room_id: str | None = None


@dataclass
class PlayerLeftRoom(BaseEvent):
    """
    Event fired when a character leaves a room.

    This event is triggered before the character is placed into
    its destination room.
    """

    player_id: str
    room_id: str
    to_room_id: str | None = None
