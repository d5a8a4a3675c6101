"""Event bus for run and step events.

The executor publishes every run event and every step transition here, in the
order they happen. Step events carry a snapshot of the step, so a handler
never sees later mutations. ``subscribe_step_updates`` adapts a plain
``on_step_update(step)`` callback onto any bus.
"""

from collections.abc import Callable
from typing import Protocol

from legalflow_runtime.events import STEP_EVENT_TYPES, Event, EventType, StepEvent
from legalflow_runtime.models import PlanStep

SyncHandler = Callable[[Event], None]
StepCallback = Callable[[PlanStep], None]


class EventBus(Protocol):
    """Anything the executor can publish run events to."""

    def emit(self, event: Event) -> None:
        """Emit an event to all registered handlers."""
        ...

    def subscribe(
        self,
        handler: SyncHandler,
        event_types: list[EventType] | None = None,
    ) -> None:
        """Subscribe a handler to events."""
        ...

    def unsubscribe(self, handler: SyncHandler) -> None:
        """Unsubscribe a handler from events."""
        ...


class LocalEventBus:
    """Synchronous in-process event bus.

    Handlers are called synchronously in registration order, so they observe
    transitions in the order the executor makes them. A handler that raises
    propagates to the emitter; the executor decides what to do with it.
    """

    def __init__(self) -> None:
        self._handlers: list[tuple[SyncHandler, list[EventType] | None]] = []

    def emit(self, event: Event) -> None:
        """Deliver the event to every handler whose filter matches."""
        for handler, event_types in list(self._handlers):
            if event_types is None or event.event_type in event_types:
                handler(event)

    def subscribe(
        self,
        handler: SyncHandler,
        event_types: list[EventType] | None = None,
    ) -> None:
        """Register a handler for the given event types, or for all events."""
        self._handlers.append((handler, event_types))

    def unsubscribe(self, handler: SyncHandler) -> None:
        """Remove every registration of the handler."""
        self._handlers = [(h, et) for h, et in self._handlers if h != handler]

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)


class NullEventBus:
    """Bus for runs nobody observes. Subscriptions are ignored."""

    def emit(self, event: Event) -> None:
        """Discard the event."""
        pass

    def subscribe(
        self,
        handler: SyncHandler,
        event_types: list[EventType] | None = None,
    ) -> None:
        """No-op."""
        pass

    def unsubscribe(self, handler: SyncHandler) -> None:
        """No-op."""
        pass


def step_update_handler(callback: StepCallback) -> SyncHandler:
    """Adapt an ``on_step_update(step)`` callback to a bus handler.

    The callback receives the step snapshot carried by each step event, once
    per transition.

    Usage:
        bus.subscribe(step_update_handler(print), STEP_EVENT_TYPES)
    """

    def handler(event: Event) -> None:
        if isinstance(event, StepEvent):
            callback(event.step)

    return handler


def subscribe_step_updates(bus: EventBus, callback: StepCallback) -> SyncHandler:
    """Subscribe ``callback`` to every step transition on ``bus``.

    Returns:
        The registered handler, for a later ``bus.unsubscribe``
    """
    handler = step_update_handler(callback)
    bus.subscribe(handler, STEP_EVENT_TYPES)
    return handler
