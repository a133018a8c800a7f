"""Public event bus API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

EventHandler = Callable[[Any], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int
    topic: str


class EventBus(Protocol):
    """Public in-process pub/sub contract."""

    def subscribe(self, topic: str, handler: EventHandler) -> Subscription:
        """Subscribe handler for a topic name."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, topic: str, payload: object) -> int:
        """Publish payload under topic and return invocation count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from surface_input.runtime.events import RuntimeEventBus

    return RuntimeEventBus()


__all__ = ["EventBus", "EventHandler", "Subscription", "create_event_bus"]
