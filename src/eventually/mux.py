"""Publish multiplexer.

Simple publish/subscribe for event records. Handlers are called
synchronously in registration order. Implements the ``Publisher`` port.
"""

from __future__ import annotations

from eventually.core.types import Event, EventHandler
from eventually.core.validation import validate_event
from eventually.registry import HandlerRegistry, Subscription


class PubMux:
    """Routes published events to the handlers registered for their type.

    Example::

        mux = PubMux()
        mux.react(on_order_completed)
        mux.publish(OrderCompleted(order_id="123"))
    """

    def __init__(self) -> None:
        self._registry = HandlerRegistry()

    def react(self, fn: EventHandler, event_type: type | None = None) -> Subscription:
        """Call *fn* for every event of the type it accepts.

        Raises :class:`~eventually.core.exceptions.InvalidHandlerError` if
        *fn* is not a valid handler; the registry is left untouched.
        """
        return self._registry.add(fn, event_type)

    def remove_handler(self, fn: EventHandler, event_type: type | None = None) -> None:
        """Stop calling *fn*. Only its first registration is removed."""
        self._registry.remove(fn, event_type)

    def publish(self, event: Event) -> None:
        """Dispatch *event* to all registered handlers for its exact type.

        Raises :class:`~eventually.core.exceptions.InvalidEventError` when
        *event* is not a record. Exceptions raised by handlers propagate
        as-is and skip the handlers after the failing one.
        """
        event_type = validate_event(event)
        self._registry.dispatch(event_type, event)

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry
