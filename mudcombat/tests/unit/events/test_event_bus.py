"""
Unit tests for event bus.

Tests the EventBus class: subscription management and inline dispatch.
"""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest

from mudcombat.events.event_bus import EventBus
from mudcombat.events.event_types import BaseEvent


@dataclass
class MockEventClass(BaseEvent):
    """Mock event class for testing."""

    value: int = 0


@pytest.fixture
def event_bus():
    """Create an EventBus instance."""
    return EventBus()


def test_event_bus_init(event_bus):
    """Test EventBus initialization."""
    assert len(event_bus._subscribers) == 0


def test_event_type_defaults_to_class_name():
    """Events without a lifecycle kind are typed by class name."""
    assert MockEventClass().event_type == "MockEventClass"


def test_event_bus_subscribe(event_bus):
    """Test EventBus.subscribe() adds subscriber."""
    handler = MagicMock()
    event_bus.subscribe(MockEventClass, handler)
    assert handler in event_bus._subscribers[MockEventClass]
    assert event_bus.get_subscriber_count(MockEventClass) == 1


def test_event_bus_subscribe_rejects_non_events(event_bus):
    """Only BaseEvent subclasses can be subscribed to."""
    with pytest.raises(ValueError, match="Event type must inherit from BaseEvent"):
        event_bus.subscribe(dict, MagicMock())


def test_event_bus_subscribe_rejects_non_callable(event_bus):
    """Handlers must be callable."""
    with pytest.raises(ValueError, match="Handler must be callable"):
        event_bus.subscribe(MockEventClass, "not callable")


def test_event_bus_unsubscribe(event_bus):
    """Test EventBus.unsubscribe() removes subscriber."""
    handler = MagicMock()
    event_bus.subscribe(MockEventClass, handler)
    assert event_bus.unsubscribe(MockEventClass, handler) is True
    assert event_bus.get_subscriber_count(MockEventClass) == 0


def test_event_bus_unsubscribe_not_found(event_bus):
    """Test EventBus.unsubscribe() when handler not found."""
    assert event_bus.unsubscribe(MockEventClass, MagicMock()) is False


@pytest.mark.asyncio
async def test_dispatch_runs_subscribers_in_order(event_bus):
    """Subscribers run in registration order; coroutines are awaited in turn."""
    calls = []

    async def first(event):
        calls.append(("first", event.value))

    def second(event):
        calls.append(("second", event.value))

    event_bus.subscribe(MockEventClass, first)
    event_bus.subscribe(MockEventClass, second)

    await event_bus.dispatch(MockEventClass(value=3))

    assert calls == [("first", 3), ("second", 3)]


@pytest.mark.asyncio
async def test_dispatch_propagates_subscriber_errors(event_bus):
    """Dispatch stops at the first failing subscriber and re-raises."""
    later = MagicMock()
    event_bus.subscribe(MockEventClass, AsyncMock(side_effect=RuntimeError("handler failed")))
    event_bus.subscribe(MockEventClass, later)

    with pytest.raises(RuntimeError, match="handler failed"):
        await event_bus.dispatch(MockEventClass())

    later.assert_not_called()


@pytest.mark.asyncio
async def test_dispatch_without_subscribers(event_bus):
    """Dispatching an event nobody listens to is a no-op."""
    await event_bus.dispatch(MockEventClass())


@pytest.mark.asyncio
async def test_dispatch_rejects_non_events(event_bus):
    """Only events can be dispatched."""
    with pytest.raises(ValueError, match="Event must inherit from BaseEvent"):
        await event_bus.dispatch("not an event")


