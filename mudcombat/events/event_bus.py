"""
Event bus for mudcombat.

This module provides the EventBus class: an in-memory pub/sub system with
one subscriber list per event class. ``dispatch()`` runs the subscribers
inline, in registration order, and lets their exceptions propagate to the
caller.
"""

import inspect
from collections import defaultdict
from collections.abc import Callable
from typing import Any, TypeVar

from ..structured_logging.enhanced_logging_config import get_logger
from .event_types import BaseEvent

# Type variable for generic event handling
T = TypeVar("T", bound=BaseEvent)


class EventBus:
    """
    Pure asyncio event bus for mudcombat.

    Subscribers may be plain callables or coroutine functions; coroutine
    results are awaited before the next subscriber runs.
    """

    def __init__(self) -> None:
        """Initialize the event bus."""
        self._subscribers: dict[type[BaseEvent], list[Callable[[Any], Any]]] = defaultdict(list)
        self._logger = get_logger("EventBus")

    async def dispatch(self, event: BaseEvent) -> None:
        """
        Deliver an event to its subscribers immediately.

        Subscribers run one after another in registration order; coroutine
        subscribers are awaited before the next one starts. Exceptions raised
        by a subscriber propagate to the caller.

        Args:
            event: The event to deliver
        """
        if not isinstance(event, BaseEvent):
            raise ValueError("Event must inherit from BaseEvent")

        subscribers = list(self._subscribers.get(type(event), []))
        if not subscribers:
            self._logger.debug("No subscribers for event type", event_type=event.event_type)
            return

        for subscriber in subscribers:
            result = subscriber(event)
            if inspect.isawaitable(result):
                await result

    def subscribe(self, event_type: type[T], handler: Callable[[T], Any]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to
            handler: The function (or coroutine function) to call with the event
        """
        if not issubclass(event_type, BaseEvent):
            raise ValueError("Event type must inherit from BaseEvent")

        if not callable(handler):
            raise ValueError("Handler must be callable")

        self._subscribers[event_type].append(handler)
        self._logger.debug("Added subscriber for event type", event_type=event_type.__name__)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], Any]) -> bool:
        """
        Unsubscribe from events of a specific type.

        Returns:
            True if the handler was found and removed, False otherwise
        """
        if not issubclass(event_type, BaseEvent):
            raise ValueError("Event type must inherit from BaseEvent")

        subscribers = self._subscribers.get(event_type, [])
        try:
            subscribers.remove(handler)
            self._logger.debug("Removed subscriber for event type", event_type=event_type.__name__)
            return True
        except ValueError:
            self._logger.debug("Handler not found for event type", event_type=event_type.__name__)
            return False

    def get_subscriber_count(self, event_type: type[BaseEvent]) -> int:
        """Get the number of subscribers for a specific event type."""
        return len(self._subscribers.get(event_type, []))
