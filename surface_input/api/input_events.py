"""Public input event types: raw host events and normalized payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

TOPIC_KEY_DOWN: Final = "keydown"
TOPIC_KEY_UP: Final = "keyup"
TOPIC_POINTER_DOWN: Final = "pointerdown"
TOPIC_POINTER_UP: Final = "pointerup"
TOPIC_DOUBLE_CLICK: Final = "doubleclick"
TOPIC_POINTER_MOVE: Final = "pointermove"
TOPIC_WHEEL: Final = "wheel"
TOPIC_CLICKED: Final = "clicked"
TOPIC_ENABLED: Final = "enabled"

BUTTON_LEFT: Final = 1
BUTTON_MIDDLE: Final = 2
BUTTON_RIGHT: Final = 3


@dataclass(frozen=True, slots=True)
class SurfaceElement:
    """Positioned element in the host layout tree."""

    tag_name: str = "canvas"
    offset_left: float = 0.0
    offset_top: float = 0.0
    offset_parent: SurfaceElement | None = None


@dataclass(frozen=True, slots=True)
class RawKeyEvent:
    """Host keyboard event."""

    key_code: int
    ctrl: bool = False
    alt: bool = False
    target: SurfaceElement | None = None


@dataclass(frozen=True, slots=True)
class RawPointerEvent:
    """Host pointer event in page coordinates.

    ``x``/``y`` are only read when no target element is available.
    """

    page_x: float
    page_y: float
    button: int = 0
    target: SurfaceElement | None = None
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class RawWheelEvent:
    """Host wheel event; ``native`` keeps the host's own event object."""

    delta: float
    page_x: float = 0.0
    page_y: float = 0.0
    target: SurfaceElement | None = None
    native: object | None = None


@dataclass(frozen=True, slots=True)
class KeyPayload:
    """Normalized keydown/keyup payload."""

    key_code: int


@dataclass(frozen=True, slots=True)
class PointerPayload:
    """Normalized pointer payload in surface coordinates."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class WheelPayload:
    """Normalized wheel payload."""

    raw_event: object
    delta: float


@dataclass(frozen=True, slots=True)
class EnabledPayload:
    """Published when input gating changes."""

    value: bool


__all__ = [
    "BUTTON_LEFT",
    "BUTTON_MIDDLE",
    "BUTTON_RIGHT",
    "EnabledPayload",
    "KeyPayload",
    "PointerPayload",
    "RawKeyEvent",
    "RawPointerEvent",
    "RawWheelEvent",
    "SurfaceElement",
    "TOPIC_CLICKED",
    "TOPIC_DOUBLE_CLICK",
    "TOPIC_ENABLED",
    "TOPIC_KEY_DOWN",
    "TOPIC_KEY_UP",
    "TOPIC_POINTER_DOWN",
    "TOPIC_POINTER_MOVE",
    "TOPIC_POINTER_UP",
    "TOPIC_WHEEL",
    "WheelPayload",
]
