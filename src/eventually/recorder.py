"""Recorder that keeps published events for inspection."""

from __future__ import annotations

from dataclasses import dataclass, field

from eventually.core.types import Event


@dataclass(eq=False)
class Recorder:
    """Publisher that appends every event to ``events``, without validation."""

    events: list[Event] = field(default_factory=list)

    def publish(self, event: Event) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
