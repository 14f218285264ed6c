"""Port definitions.

Application code publishes through the ``Publisher`` protocol only, so a
:class:`~eventually.mux.PubMux`, an :class:`~eventually.replay.Eventually`
or a :class:`~eventually.recorder.Recorder` can be swapped freely.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

# An event is an instance of a record type (dataclass, NamedTuple or
# pydantic model). The record's class is its routing key.
Event = Any

# A handler is a one-argument callable returning nothing.
EventHandler = Callable[[Any], None]


@runtime_checkable
class Publisher(Protocol):
    """Anything that accepts events."""

    def publish(self, event: Event) -> None: ...


@runtime_checkable
class Reactor(Protocol):
    """Anything that registers live handlers."""

    def react(self, fn: EventHandler, event_type: type | None = None) -> Any: ...
