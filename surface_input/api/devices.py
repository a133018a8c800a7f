"""Device event source contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Protocol

KIND_KEY_DOWN: Final = "keydown"
KIND_KEY_UP: Final = "keyup"
KIND_POINTER_DOWN: Final = "pointerdown"
KIND_POINTER_UP: Final = "pointerup"
KIND_DOUBLE_CLICK: Final = "doubleclick"
KIND_POINTER_MOVE: Final = "pointermove"
KIND_WHEEL: Final = "wheel"

KEYBOARD_KINDS: Final[tuple[str, ...]] = (KIND_KEY_DOWN, KIND_KEY_UP)
POINTER_KINDS: Final[tuple[str, ...]] = (
    KIND_POINTER_DOWN,
    KIND_POINTER_UP,
    KIND_DOUBLE_CLICK,
    KIND_POINTER_MOVE,
    KIND_WHEEL,
)

RawEventHandler = Callable[[Any], None]


@dataclass(frozen=True, slots=True)
class CallbackHandle:
    """Opaque registration token returned by a device source."""

    id: int
    kind: str


class DeviceEventSource(Protocol):
    """Host-side source of raw keyboard/pointer events."""

    def register_callback(self, kind: str, handler: RawEventHandler) -> CallbackHandle:
        """Register one handler for a raw event kind."""

    def deregister_callback(self, handle: CallbackHandle) -> None:
        """Remove a previously registered handler."""


__all__ = [
    "CallbackHandle",
    "DeviceEventSource",
    "KEYBOARD_KINDS",
    "KIND_DOUBLE_CLICK",
    "KIND_KEY_DOWN",
    "KIND_KEY_UP",
    "KIND_POINTER_DOWN",
    "KIND_POINTER_MOVE",
    "KIND_POINTER_UP",
    "KIND_WHEEL",
    "POINTER_KINDS",
    "RawEventHandler",
]
