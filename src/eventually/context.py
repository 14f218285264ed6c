"""Carry a publisher through the current call chain.

Deeply nested code can publish without a publisher parameter::

    with use_publisher(mux):
        place_order(...)          # calls eventually.publish(OrderCompleted(...))

The binding lives in a :class:`contextvars.ContextVar`, so it is scoped to
the current thread or asyncio task and restored when the ``with`` block
exits. Two publish entry points exist on purpose: :func:`publish` raises
when nothing is bound, :func:`publish_if_bound` does nothing.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

from eventually.core.exceptions import MissingCollaboratorError
from eventually.core.types import Event, EventHandler, Publisher, Reactor
from eventually.replay import Eventually
from eventually.registry import Subscription

_publisher: contextvars.ContextVar[Publisher | None] = contextvars.ContextVar(
    "eventually_publisher", default=None
)


@contextmanager
def use_publisher(publisher: Publisher) -> Iterator[Publisher]:
    """Bind *publisher* for the duration of the ``with`` block."""
    if not isinstance(publisher, Publisher):
        raise TypeError(
            f"publisher must have a publish method (got: {type(publisher).__name__})"
        )
    token = _publisher.set(publisher)
    try:
        yield publisher
    finally:
        _publisher.reset(token)


def context_with_publisher(publisher: Publisher) -> contextvars.Context:
    """Return a copy of the current context with *publisher* bound.

    Useful for handing work to another thread: ``ctx.run(fn, *args)``.
    """
    if not isinstance(publisher, Publisher):
        raise TypeError(
            f"publisher must have a publish method (got: {type(publisher).__name__})"
        )
    ctx = contextvars.copy_context()
    ctx.run(_publisher.set, publisher)
    return ctx


def current_publisher() -> Publisher | None:
    """Return the bound publisher, or ``None``."""
    return _publisher.get()


def _require_publisher() -> Publisher:
    publisher = _publisher.get()
    if publisher is None:
        raise MissingCollaboratorError("context does not have a publisher")
    return publisher


def _require_eventually() -> Eventually:
    publisher = _publisher.get()
    if not isinstance(publisher, Eventually):
        raise MissingCollaboratorError(
            "context does not have eventually",
            details={"bound": type(publisher).__name__},
        )
    return publisher


def publish(event: Event) -> None:
    """Publish through the bound publisher.

    Raises:
        MissingCollaboratorError: nothing is bound.
    """
    _require_publisher().publish(event)


def publish_if_bound(event: Event) -> bool:
    """Publish through the bound publisher if there is one.

    Returns False, without publishing, when nothing is bound.
    """
    publisher = _publisher.get()
    if publisher is None:
        return False
    publisher.publish(event)
    return True


def react(fn: EventHandler, event_type: type | None = None) -> Subscription:
    """Register *fn* on the bound dispatcher."""
    reactor = _publisher.get()
    if not isinstance(reactor, Reactor):
        raise MissingCollaboratorError(
            "context does not have a dispatcher",
            details={"bound": type(reactor).__name__},
        )
    return reactor.react(fn, event_type)


def raise_event(event: Event) -> None:
    """Raise *event* on the bound :class:`Eventually`."""
    _require_eventually().raise_event(event)


def handle_event(fn: EventHandler, event_type: type | None = None) -> int:
    """Replay the bound :class:`Eventually` log through *fn*."""
    return _require_eventually().handle_event(fn, event_type)
