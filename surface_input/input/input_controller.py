"""Translate raw keyboard/pointer events into normalized surface events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from surface_input.api.devices import (
    KIND_DOUBLE_CLICK,
    KIND_KEY_DOWN,
    KIND_KEY_UP,
    KIND_POINTER_DOWN,
    KIND_POINTER_MOVE,
    KIND_POINTER_UP,
    KIND_WHEEL,
    CallbackHandle,
    DeviceEventSource,
)
from surface_input.api.events import EventBus, EventHandler, Subscription, create_event_bus
from surface_input.api.input_events import (
    TOPIC_DOUBLE_CLICK,
    TOPIC_ENABLED,
    TOPIC_KEY_DOWN,
    TOPIC_KEY_UP,
    TOPIC_POINTER_DOWN,
    TOPIC_POINTER_MOVE,
    TOPIC_POINTER_UP,
    TOPIC_WHEEL,
    EnabledPayload,
    KeyPayload,
    PointerPayload,
    RawKeyEvent,
    RawPointerEvent,
    RawWheelEvent,
    SurfaceElement,
    WheelPayload,
)
from surface_input.input.click_synthesizer import ClickSynthesizer
from surface_input.input.coordinates import surface_coords
from surface_input.input.state import ButtonState, InputState
from surface_input.runtime.config import InputConfig, get_input_config
from surface_input.runtime.errors import RECOVERABLE_HOST_ERRORS, log_recoverable

logger = logging.getLogger(__name__)


class SurfaceInputController:
    """Publish normalized key and pointer events for one drawing surface.

    Keyboard callbacks are registered on ``keyboard_source`` (the host window)
    and pointer callbacks on ``pointer_source`` (the surface element). When no
    pointer source is given the keyboard source serves both.
    """

    def __init__(
        self,
        keyboard_source: DeviceEventSource,
        pointer_source: DeviceEventSource | None = None,
        *,
        bus: EventBus | None = None,
        config: InputConfig | None = None,
    ) -> None:
        self._config = config if config is not None else get_input_config()
        self._bus = bus if bus is not None else create_event_bus()
        self._state = InputState(enabled=self._config.enabled)
        self._text_entry_tags = frozenset(tag.upper() for tag in self._config.text_entry_tags)
        self._trace = self._config.trace_enabled
        self._closed = False
        self._registrations: list[tuple[DeviceEventSource, CallbackHandle]] = []
        self._clicks = ClickSynthesizer(self._bus)

        pointer_source = keyboard_source if pointer_source is None else pointer_source
        try:
            self._register(keyboard_source, KIND_KEY_DOWN, self._on_key_down)
            self._register(keyboard_source, KIND_KEY_UP, self._on_key_up)
            self._register(pointer_source, KIND_POINTER_DOWN, self._on_pointer_down)
            self._register(pointer_source, KIND_POINTER_UP, self._on_pointer_up)
            self._register(pointer_source, KIND_DOUBLE_CLICK, self._on_double_click)
            self._register(pointer_source, KIND_POINTER_MOVE, self._on_pointer_move)
            self._register(pointer_source, KIND_WHEEL, self._on_wheel)
        except BaseException:
            # The caller never receives a half-attached controller.
            self._closed = True
            self._detach()
            raise
        logger.debug("input_attached registrations=%d", len(self._registrations))

    def __enter__(self) -> SurfaceInputController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def enabled(self) -> bool:
        return self._state.enabled

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def ctrl_down(self) -> bool:
        return self._state.ctrl_down

    @property
    def alt_down(self) -> bool:
        return self._state.alt_down

    @property
    def buttons(self) -> ButtonState:
        return self._state.buttons

    @property
    def left_down(self) -> bool:
        return self._state.left_down

    @property
    def middle_down(self) -> bool:
        return self._state.middle_down

    @property
    def right_down(self) -> bool:
        return self._state.right_down

    def is_key_down(self, key_code: int) -> bool:
        return self._state.is_key_down(key_code)

    def subscribe(self, topic: str, handler: EventHandler) -> Subscription:
        return self._bus.subscribe(topic, handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._bus.unsubscribe(subscription)

    def set_enabled(self, enabled: bool) -> None:
        """Toggle translation; publishes ``enabled`` only on an actual change."""
        value = bool(enabled)
        if self._state.enabled == value:
            return
        self._state.enabled = value
        logger.debug("input_enabled value=%s", value)
        self._bus.publish(TOPIC_ENABLED, EnabledPayload(value))

    def reset_state(self) -> None:
        """Forget held keys, modifiers and buttons without publishing."""
        self._state.clear()
        self._clicks.reset()

    def close(self) -> None:
        """Deregister every host callback and stop click synthesis."""
        if self._closed:
            return
        self._closed = True
        self._detach()
        logger.debug("input_closed")

    def _detach(self) -> None:
        for source, handle in self._registrations:
            try:
                source.deregister_callback(handle)
            except RECOVERABLE_HOST_ERRORS:
                log_recoverable(logger, "input_deregister_failed kind=%s", handle.kind)
        self._registrations.clear()
        self._clicks.close()

    def _register(
        self,
        source: DeviceEventSource,
        kind: str,
        handler: Callable[[Any], None],
    ) -> None:
        handle = source.register_callback(kind, handler)
        self._registrations.append((source, handle))

    def _accepting(self) -> bool:
        return self._state.enabled and not self._closed

    def _on_key_down(self, event: RawKeyEvent) -> None:
        self._handle_key(event, is_down=True)

    def _on_key_up(self, event: RawKeyEvent) -> None:
        self._handle_key(event, is_down=False)

    def _handle_key(self, event: RawKeyEvent, *, is_down: bool) -> None:
        if not self._accepting():
            return
        if self._is_text_entry(event.target):
            return
        key_code = event.key_code
        if isinstance(key_code, bool) or not isinstance(key_code, int) or key_code < 0:
            self._trace_drop("key", key_code)
            return
        if event.ctrl:
            self._state.ctrl_down = is_down
        elif event.alt:
            self._state.alt_down = is_down
        else:
            self._state.set_key(key_code, is_down)
            self._publish(TOPIC_KEY_DOWN if is_down else TOPIC_KEY_UP, KeyPayload(key_code))

    def _on_pointer_down(self, event: RawPointerEvent) -> None:
        if not self._accepting():
            return
        self._state.set_button(event.button, True)
        self._publish(TOPIC_POINTER_DOWN, self._pointer_payload(event))

    def _on_pointer_up(self, event: RawPointerEvent) -> None:
        if not self._accepting():
            return
        self._state.set_button(event.button, False)
        self._publish(TOPIC_POINTER_UP, self._pointer_payload(event))

    def _on_double_click(self, event: RawPointerEvent) -> None:
        if not self._accepting():
            return
        self._state.release_on_double_click(event.button)
        self._publish(TOPIC_DOUBLE_CLICK, self._pointer_payload(event))

    def _on_pointer_move(self, event: RawPointerEvent) -> None:
        if not self._accepting():
            return
        self._publish(TOPIC_POINTER_MOVE, self._pointer_payload(event))

    def _on_wheel(self, event: RawWheelEvent) -> None:
        if not self._accepting():
            return
        raw = event.native if event.native is not None else event
        self._publish(TOPIC_WHEEL, WheelPayload(raw_event=raw, delta=event.delta))

    def _is_text_entry(self, target: SurfaceElement | None) -> bool:
        if target is None:
            return False
        return target.tag_name.upper() in self._text_entry_tags

    @staticmethod
    def _pointer_payload(event: RawPointerEvent) -> PointerPayload:
        x, y = surface_coords(event)
        return PointerPayload(x, y)

    def _publish(self, topic: str, payload: object) -> None:
        if self._trace:
            logger.debug("input_event topic=%s payload=%r", topic, payload)
        self._bus.publish(topic, payload)

    def _trace_drop(self, what: str, value: object) -> None:
        if self._trace:
            logger.debug("input_dropped kind=%s value=%r", what, value)


__all__ = ["SurfaceInputController"]
