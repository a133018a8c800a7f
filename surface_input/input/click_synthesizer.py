"""Synthesizes ``clicked`` from matching pointerdown/pointerup pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from surface_input.api.events import EventBus, Subscription
from surface_input.api.input_events import (
    TOPIC_CLICKED,
    TOPIC_POINTER_DOWN,
    TOPIC_POINTER_UP,
    PointerPayload,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArmedClick:
    """Coordinates of the pending pointerdown."""

    x: int
    y: int


class ClickSynthesizer:
    """Two-state machine: idle (``armed is None``) or armed at one down position.

    There is no timeout and no per-button distinction.
    """

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self._armed: ArmedClick | None = None
        self._subscriptions: tuple[Subscription, ...] = (
            bus.subscribe(TOPIC_POINTER_DOWN, self._on_pointer_down),
            bus.subscribe(TOPIC_POINTER_UP, self._on_pointer_up),
        )

    @property
    def armed(self) -> ArmedClick | None:
        return self._armed

    @property
    def is_armed(self) -> bool:
        return self._armed is not None

    def reset(self) -> None:
        self._armed = None

    def close(self) -> None:
        """Stop observing the bus."""
        for subscription in self._subscriptions:
            self._bus.unsubscribe(subscription)
        self._subscriptions = ()
        self._armed = None

    def _on_pointer_down(self, payload: PointerPayload) -> None:
        self._armed = ArmedClick(payload.x, payload.y)

    def _on_pointer_up(self, payload: PointerPayload) -> None:
        armed = self._armed
        if armed is None:
            return
        self._armed = None
        if armed.x == payload.x and armed.y == payload.y:
            logger.debug("click_synthesized x=%d y=%d", armed.x, armed.y)
            self._bus.publish(TOPIC_CLICKED, PointerPayload(armed.x, armed.y))


__all__ = ["ArmedClick", "ClickSynthesizer"]
