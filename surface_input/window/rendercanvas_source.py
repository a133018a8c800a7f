"""Rendercanvas-backed device event source."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from surface_input.api.devices import (
    KIND_DOUBLE_CLICK,
    KIND_KEY_DOWN,
    KIND_KEY_UP,
    KIND_POINTER_DOWN,
    KIND_POINTER_MOVE,
    KIND_POINTER_UP,
    KIND_WHEEL,
    CallbackHandle,
    RawEventHandler,
)
from surface_input.api.input_events import (
    BUTTON_LEFT,
    BUTTON_MIDDLE,
    BUTTON_RIGHT,
    RawKeyEvent,
    RawPointerEvent,
    RawWheelEvent,
    SurfaceElement,
)
from surface_input.api.keycodes import KeyCode

_LOG = logging.getLogger("surface_input.window")

RENDERCANVAS_EVENT_TYPES: Final[Mapping[str, str]] = {
    KIND_KEY_DOWN: "key_down",
    KIND_KEY_UP: "key_up",
    KIND_POINTER_DOWN: "pointer_down",
    KIND_POINTER_UP: "pointer_up",
    KIND_DOUBLE_CLICK: "double_click",
    KIND_POINTER_MOVE: "pointer_move",
    KIND_WHEEL: "wheel",
}

# rendercanvas: 1 left, 2 right, 3 middle.
_BUTTONS: Final[Mapping[int, int]] = {1: BUTTON_LEFT, 2: BUTTON_RIGHT, 3: BUTTON_MIDDLE}

_NAMED_KEYS: Final[Mapping[str, KeyCode]] = {
    "backspace": KeyCode.BACKSPACE,
    "tab": KeyCode.TAB,
    "enter": KeyCode.ENTER,
    "shift": KeyCode.SHIFT,
    "control": KeyCode.CTRL,
    "alt": KeyCode.ALT,
    "pause": KeyCode.PAUSE_BREAK,
    "capslock": KeyCode.CAPS_LOCK,
    "escape": KeyCode.ESCAPE,
    " ": KeyCode.SPACE,
    "space": KeyCode.SPACE,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "end": KeyCode.END,
    "home": KeyCode.HOME,
    "arrowleft": KeyCode.LEFT_ARROW,
    "arrowup": KeyCode.UP_ARROW,
    "arrowright": KeyCode.RIGHT_ARROW,
    "arrowdown": KeyCode.DOWN_ARROW,
    "insert": KeyCode.INSERT,
    "delete": KeyCode.DELETE,
    "meta": KeyCode.LEFT_WINDOW,
    "contextmenu": KeyCode.SELECT_KEY,
    "numlock": KeyCode.NUM_LOCK,
    "scrolllock": KeyCode.SCROLL_LOCK,
    "*": KeyCode.MULTIPLY,
    "+": KeyCode.ADD,
    ";": KeyCode.SEMI_COLON,
    "=": KeyCode.EQUAL_SIGN,
    ",": KeyCode.COMMA,
    "-": KeyCode.DASH,
    ".": KeyCode.PERIOD,
    "/": KeyCode.FORWARD_SLASH,
    "`": KeyCode.GRAVE_ACCENT,
    "[": KeyCode.OPEN_BRACKET,
    "\\": KeyCode.BACK_SLASH,
    "]": KeyCode.CLOSE_BRACKET,
    "'": KeyCode.SINGLE_QUOTE,
}


def key_code_for(key: str) -> int | None:
    """Map a rendercanvas key name to its device key code."""
    if len(key) == 1 and key.isascii() and key.isalnum():
        return ord(key.upper())
    lowered = key.lower()
    named = _NAMED_KEYS.get(lowered)
    if named is not None:
        return int(named)
    if lowered.startswith("f") and lowered[1:].isdigit():
        number = int(lowered[1:])
        if 1 <= number <= 12:
            return int(KeyCode.F1) + number - 1
    return None


@dataclass(slots=True)
class RenderCanvasEventSource:
    """Device event source over a rendercanvas canvas.

    Rendercanvas reports canvas-relative logical coordinates; they are passed
    on as page coordinates targeted at ``element``.
    """

    canvas: Any
    element: SurfaceElement = field(default_factory=SurfaceElement)
    _next_id: int = field(default=1, repr=False)
    _wrappers: dict[int, tuple[str, Any]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if not callable(getattr(self.canvas, "add_event_handler", None)):
            raise RuntimeError("Canvas does not support event handlers.")

    def register_callback(self, kind: str, handler: RawEventHandler) -> CallbackHandle:
        event_type = RENDERCANVAS_EVENT_TYPES.get(kind)
        if event_type is None:
            raise ValueError(f"unsupported event kind: {kind}")
        convert = self._converter(kind)

        def _wrapper(event: object) -> None:
            raw = convert(event)
            if raw is None:
                _LOG.debug("rendercanvas_event_dropped kind=%s payload=%r", kind, event)
                return
            handler(raw)

        self.canvas.add_event_handler(_wrapper, event_type)
        handle = CallbackHandle(self._next_id, kind)
        self._next_id += 1
        self._wrappers[handle.id] = (event_type, _wrapper)
        return handle

    def deregister_callback(self, handle: CallbackHandle) -> None:
        entry = self._wrappers.pop(handle.id, None)
        if entry is None:
            return
        event_type, wrapper = entry
        remover = getattr(self.canvas, "remove_event_handler", None)
        if callable(remover):
            remover(wrapper, event_type)

    @property
    def registered_count(self) -> int:
        return len(self._wrappers)

    def _converter(self, kind: str) -> Any:
        if kind in (KIND_KEY_DOWN, KIND_KEY_UP):
            return self._parse_key_event
        if kind == KIND_WHEEL:
            return self._parse_wheel_event
        return self._parse_pointer_event

    def _parse_key_event(self, event: object) -> RawKeyEvent | None:
        key = _event_value(event, "key")
        if not isinstance(key, str) or not key:
            return None
        code = key_code_for(key)
        if code is None:
            return None
        modifiers = _modifiers(event)
        return RawKeyEvent(
            key_code=code,
            ctrl="control" in modifiers,
            alt="alt" in modifiers,
            target=self.element,
        )

    def _parse_pointer_event(self, event: object) -> RawPointerEvent | None:
        x = _event_value(event, "x")
        y = _event_value(event, "y")
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            return None
        button = _event_value(event, "button", 0)
        if not isinstance(button, int):
            button = 0
        return RawPointerEvent(
            page_x=float(x),
            page_y=float(y),
            button=_BUTTONS.get(button, 0),
            target=self.element,
            x=float(x),
            y=float(y),
        )

    def _parse_wheel_event(self, event: object) -> RawWheelEvent | None:
        dy = _event_value(event, "dy")
        if not isinstance(dy, (int, float)):
            return None
        x = _event_value(event, "x", 0.0)
        y = _event_value(event, "y", 0.0)
        return RawWheelEvent(
            delta=float(dy),
            page_x=float(x) if isinstance(x, (int, float)) else 0.0,
            page_y=float(y) if isinstance(y, (int, float)) else 0.0,
            target=self.element,
            native=event,
        )


def create_rendercanvas_source(
    canvas: Any | None = None,
    *,
    element: SurfaceElement | None = None,
    width: int = 800,
    height: int = 600,
    title: str = "Surface Input",
) -> RenderCanvasEventSource:
    """Create an event source over an existing or newly created canvas."""
    if canvas is None:
        try:
            import rendercanvas.auto as rc_auto
        except ImportError as exc:
            raise RuntimeError(
                "Render canvas backend unavailable. Install a desktop backend such as glfw."
            ) from exc
        canvas_cls = getattr(rc_auto, "RenderCanvas", None)
        if canvas_cls is None:
            raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
        canvas = canvas_cls(size=(int(width), int(height)), title=title)
    if element is None:
        return RenderCanvasEventSource(canvas=canvas)
    return RenderCanvasEventSource(canvas=canvas, element=element)


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)


def _modifiers(event: object) -> frozenset[str]:
    raw = _event_value(event, "modifiers", ())
    if not isinstance(raw, (tuple, list, set, frozenset)):
        return frozenset()
    return frozenset(str(item).lower() for item in raw)


__all__ = [
    "RENDERCANVAS_EVENT_TYPES",
    "RenderCanvasEventSource",
    "create_rendercanvas_source",
    "key_code_for",
]
