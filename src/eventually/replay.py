"""Dispatcher that keeps a log of every raised event.

Besides live dispatch, :meth:`Eventually.handle_event` replays the log
against a handler supplied after the fact, without registering it.
"""

from __future__ import annotations

from eventually.config.logging import get_logger
from eventually.core.types import Event, EventHandler
from eventually.core.validation import handler_name, type_name, validate_event, validate_handler
from eventually.registry import HandlerRegistry, Subscription

logger = get_logger(__name__)


class Eventually:
    """Event hub with live handlers and an append-only event log."""

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._registry = HandlerRegistry()

    def react(self, fn: EventHandler, event_type: type | None = None) -> Subscription:
        """Register *fn* for future events of the type it accepts."""
        return self._registry.add(fn, event_type)

    def remove_handler(self, fn: EventHandler, event_type: type | None = None) -> None:
        self._registry.remove(fn, event_type)

    def raise_event(self, event: Event) -> None:
        """Record *event* in the log, then dispatch it to live handlers.

        The event is logged even when no handler is registered for it, and
        before any handler runs, so a failing handler does not lose it.
        """
        event_type = validate_event(event)
        self._events.append(event)
        self._registry.dispatch(event_type, event)

    def publish(self, event: Event) -> None:
        self.raise_event(event)

    def handle_event(self, fn: EventHandler, event_type: type | None = None) -> int:
        """Call *fn* once per logged event of its type, oldest first.

        Returns the number of events replayed. Events raised while the
        replay runs are not part of it.
        """
        accepted = validate_handler(fn, event_type)
        matching = [event for event in self._events if type(event) is accepted]
        logger.debug(
            "eventually.events.replayed",
            event_type=type_name(accepted),
            handler=handler_name(fn),
            count=len(matching),
        )
        for event in matching:
            fn(event)
        return len(matching)

    @property
    def events(self) -> list[Event]:
        """Copy of the event log in raise order."""
        return list(self._events)

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry
