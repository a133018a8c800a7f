from __future__ import annotations

from collections.abc import Callable
from typing import Any

from surface_input.api.devices import CallbackHandle
from surface_input.api.events import Subscription
from surface_input.api.input_events import RawKeyEvent, RawPointerEvent, RawWheelEvent, SurfaceElement
from surface_input.runtime.config import InputConfig
from surface_input.runtime.events import RuntimeEventBus


class FakeDeviceSource:
    def __init__(self) -> None:
        self._next_id = 1
        self.handlers: dict[int, tuple[str, Callable[[Any], None]]] = {}
        self.deregistered: list[CallbackHandle] = []

    def register_callback(self, kind: str, handler: Callable[[Any], None]) -> CallbackHandle:
        handle = CallbackHandle(self._next_id, kind)
        self._next_id += 1
        self.handlers[handle.id] = (kind, handler)
        return handle

    def deregister_callback(self, handle: CallbackHandle) -> None:
        self.handlers.pop(handle.id, None)
        self.deregistered.append(handle)

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.handlers.values()]

    def emit(self, kind: str, event: object) -> None:
        for registered, handler in tuple(self.handlers.values()):
            if registered == kind:
                handler(event)

    def key(self, kind: str, code: int, **flags: Any) -> None:
        self.emit(kind, RawKeyEvent(key_code=code, **flags))

    def pointer(self, kind: str, x: float, y: float, button: int = 1, **extra: Any) -> None:
        self.emit(kind, RawPointerEvent(page_x=x, page_y=y, button=button, target=SURFACE, **extra))

    def wheel(self, delta: float) -> None:
        self.emit("wheel", RawWheelEvent(delta=delta, target=SURFACE))


class EventRecorder:
    def __init__(self, bus: RuntimeEventBus, *topics: str) -> None:
        self.seen: list[tuple[str, object]] = []
        self.subscriptions: list[Subscription] = [
            bus.subscribe(topic, lambda payload, topic=topic: self.seen.append((topic, payload)))
            for topic in topics
        ]

    def topics(self) -> list[str]:
        return [topic for topic, _ in self.seen]

    def payloads(self, topic: str) -> list[object]:
        return [payload for seen_topic, payload in self.seen if seen_topic == topic]


SURFACE = SurfaceElement(tag_name="canvas")

ALL_TOPICS = (
    "keydown",
    "keyup",
    "pointerdown",
    "pointerup",
    "doubleclick",
    "pointermove",
    "wheel",
    "clicked",
    "enabled",
)


def make_config(**overrides: Any) -> InputConfig:
    return InputConfig(**overrides)
