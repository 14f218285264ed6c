"""Handler registry — maps event record types to ordered handler lists.

Registration order within one type is dispatch order. The same callable
may be registered more than once; every registration is its own entry.

The registry holds no lock. Callers sharing one instance across threads
must serialise registration, removal and dispatch themselves.
"""

from __future__ import annotations

from typing import Any

from eventually.config.logging import get_logger
from eventually.core.types import Event, EventHandler
from eventually.core.validation import handler_name, type_name, validate_handler

logger = get_logger(__name__)


def _same_callable(a: Any, b: Any) -> bool:
    # Bound methods, builtin ones included, are rebuilt on every attribute
    # access, so compare the instance and the function they wrap instead.
    if hasattr(a, "__self__") and hasattr(b, "__self__"):
        if a.__self__ is not b.__self__:
            return False
        if hasattr(a, "__func__") or hasattr(b, "__func__"):
            return getattr(a, "__func__", None) is getattr(b, "__func__", None)
        return getattr(a, "__name__", None) == getattr(b, "__name__", None)
    return a is b


class Subscription:
    """Handle for a single registration.

    Returned by :meth:`HandlerRegistry.add`; :meth:`cancel` removes exactly
    this entry even when the same callable is registered several times.
    """

    __slots__ = ("event_type", "handler", "_registry")

    def __init__(
        self, registry: HandlerRegistry, event_type: type, handler: EventHandler
    ) -> None:
        self.event_type = event_type
        self.handler = handler
        self._registry: HandlerRegistry | None = registry

    @property
    def active(self) -> bool:
        return self._registry is not None

    def cancel(self) -> None:
        """Remove this registration. Calling it again is a no-op."""
        if self._registry is not None:
            self._registry.discard(self)

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return (
            f"<Subscription {type_name(self.event_type)} -> "
            f"{handler_name(self.handler)} ({state})>"
        )


class HandlerRegistry:
    """Registry that maps an event type to its :class:`Subscription` entries."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Subscription]] = {}

    def add(self, fn: EventHandler, event_type: type | None = None) -> Subscription:
        """Validate *fn* and append it to the list of the type it accepts."""
        accepted = validate_handler(fn, event_type)
        subscription = Subscription(self, accepted, fn)
        entries = self._handlers.setdefault(accepted, [])
        entries.append(subscription)
        logger.debug(
            "eventually.handler.registered",
            event_type=type_name(accepted),
            handler=handler_name(fn),
            position=len(entries),
        )
        return subscription

    def remove(self, fn: EventHandler, event_type: type | None = None) -> bool:
        """Remove the first registration of *fn*; return whether one was found."""
        accepted = validate_handler(fn, event_type)
        for subscription in self._handlers.get(accepted, []):
            if _same_callable(subscription.handler, fn):
                self.discard(subscription)
                return True
        return False

    def discard(self, subscription: Subscription) -> None:
        """Remove exactly *subscription*, if it is still registered."""
        entries = self._handlers.get(subscription.event_type, [])
        for i, entry in enumerate(entries):
            if entry is subscription:
                del entries[i]
                subscription._registry = None
                logger.debug(
                    "eventually.handler.removed",
                    event_type=type_name(subscription.event_type),
                    handler=handler_name(subscription.handler),
                )
                return

    def handlers_for(self, event_type: type) -> list[EventHandler]:
        """Return the handlers for *event_type* in registration order."""
        return [entry.handler for entry in self._handlers.get(event_type, [])]

    def dispatch(self, event_type: type, event: Event) -> int:
        """Call every handler of *event_type* with *event*; return how many ran.

        Iterates a snapshot, so handlers added or removed while dispatching
        only affect later events. A handler exception propagates unchanged
        and the remaining handlers are skipped.
        """
        handlers = self.handlers_for(event_type)
        logger.debug(
            "eventually.event.dispatched",
            event_type=type_name(event_type),
            handlers=len(handlers),
        )
        for handler in handlers:
            handler(event)
        return len(handlers)

    @property
    def event_types(self) -> set[type]:
        return {tp for tp, entries in self._handlers.items() if entries}

    def __contains__(self, event_type: object) -> bool:
        return bool(self._handlers.get(event_type))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._handlers.values())
