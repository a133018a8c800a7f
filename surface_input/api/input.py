"""Public surface input contracts and factories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from surface_input.api.devices import DeviceEventSource
from surface_input.api.events import EventBus, EventHandler, Subscription
from surface_input.api.input_events import SurfaceElement

if TYPE_CHECKING:
    from surface_input.input.state import ButtonState
    from surface_input.runtime.config import InputConfig


class SurfaceInput(Protocol):
    """Engine-facing input translation surface."""

    @property
    def bus(self) -> EventBus: ...

    @property
    def enabled(self) -> bool: ...

    @property
    def ctrl_down(self) -> bool: ...

    @property
    def alt_down(self) -> bool: ...

    @property
    def buttons(self) -> "ButtonState": ...

    def is_key_down(self, key_code: int) -> bool:
        """Return whether a key code is currently held."""

    def set_enabled(self, enabled: bool) -> None:
        """Enable or suppress all translation."""

    def subscribe(self, topic: str, handler: EventHandler) -> Subscription:
        """Subscribe to a normalized event topic."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a topic subscription."""

    def reset_state(self) -> None:
        """Forget tracked keys, modifiers and buttons."""

    def close(self) -> None:
        """Deregister host callbacks."""


def create_surface_input(
    keyboard_source: DeviceEventSource,
    pointer_source: DeviceEventSource | None = None,
    *,
    bus: EventBus | None = None,
    config: "InputConfig | None" = None,
) -> SurfaceInput:
    """Create default input controller over host device sources."""
    from surface_input.input.input_controller import SurfaceInputController

    return SurfaceInputController(keyboard_source, pointer_source, bus=bus, config=config)


def create_canvas_input(
    canvas: Any | None = None,
    *,
    element: SurfaceElement | None = None,
    bus: EventBus | None = None,
    config: "InputConfig | None" = None,
) -> SurfaceInput:
    """Create input controller wired to a rendercanvas canvas."""
    from surface_input.window.rendercanvas_source import create_rendercanvas_source

    source = create_rendercanvas_source(canvas, element=element)
    return create_surface_input(source, bus=bus, config=config)


__all__ = ["SurfaceInput", "create_canvas_input", "create_surface_input"]
