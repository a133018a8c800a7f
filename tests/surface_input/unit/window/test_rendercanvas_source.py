from __future__ import annotations

import sys
from types import ModuleType, SimpleNamespace

import pytest

from surface_input.api.input_events import (
    KeyPayload,
    PointerPayload,
    RawKeyEvent,
    RawPointerEvent,
    SurfaceElement,
)
from surface_input.api.keycodes import KeyCode
from surface_input.input.input_controller import SurfaceInputController
from surface_input.runtime.config import InputConfig
from surface_input.runtime.events import RuntimeEventBus
from surface_input.window.rendercanvas_source import (
    RenderCanvasEventSource,
    create_rendercanvas_source,
    key_code_for,
)


class _Canvas:
    def __init__(self) -> None:
        self.handlers: dict[str, list] = {}
        self.removed: list[str] = []

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def remove_event_handler(self, handler, event_type: str) -> None:
        self.handlers[event_type].remove(handler)
        self.removed.append(event_type)

    def emit(self, event_type: str, **payload) -> None:
        event = {"event_type": event_type, **payload}
        for handler in list(self.handlers.get(event_type, [])):
            handler(event)


def test_requires_event_handler_support() -> None:
    with pytest.raises(RuntimeError):
        RenderCanvasEventSource(canvas=object())


def test_register_maps_kinds_to_rendercanvas_types() -> None:
    canvas = _Canvas()
    source = RenderCanvasEventSource(canvas=canvas)
    for kind in ("keydown", "keyup", "pointerdown", "pointerup", "doubleclick", "pointermove", "wheel"):
        source.register_callback(kind, lambda event: None)

    assert sorted(canvas.handlers) == [
        "double_click",
        "key_down",
        "key_up",
        "pointer_down",
        "pointer_move",
        "pointer_up",
        "wheel",
    ]
    assert source.registered_count == 7


def test_register_rejects_unknown_kind() -> None:
    source = RenderCanvasEventSource(canvas=_Canvas())
    with pytest.raises(ValueError):
        source.register_callback("touchstart", lambda event: None)


def test_deregister_removes_exact_wrapper() -> None:
    canvas = _Canvas()
    source = RenderCanvasEventSource(canvas=canvas)
    handle = source.register_callback("keydown", lambda event: None)

    source.deregister_callback(handle)
    source.deregister_callback(handle)

    assert canvas.handlers["key_down"] == []
    assert canvas.removed == ["key_down"]
    assert source.registered_count == 0


def test_key_events_convert_names_and_modifiers() -> None:
    canvas = _Canvas()
    source = RenderCanvasEventSource(canvas=canvas)
    seen: list[RawKeyEvent] = []
    source.register_callback("keydown", seen.append)

    canvas.emit("key_down", key="a", modifiers=())
    canvas.emit("key_down", key="s", modifiers=("Control",))
    canvas.emit("key_down", key="ArrowLeft", modifiers=("Alt", "Shift"))
    canvas.emit("key_down", key="Unidentified", modifiers=())

    assert [event.key_code for event in seen] == [KeyCode.A, KeyCode.S, KeyCode.LEFT_ARROW]
    assert [(event.ctrl, event.alt) for event in seen] == [
        (False, False),
        (True, False),
        (False, True),
    ]


def test_pointer_buttons_are_remapped_and_targeted() -> None:
    canvas = _Canvas()
    element = SurfaceElement(tag_name="canvas", offset_left=0, offset_top=0)
    source = RenderCanvasEventSource(canvas=canvas, element=element)
    seen: list[RawPointerEvent] = []
    source.register_callback("pointerdown", seen.append)

    canvas.emit("pointer_down", x=1.0, y=2.0, button=1)
    canvas.emit("pointer_down", x=1.0, y=2.0, button=2)
    canvas.emit("pointer_down", x=1.0, y=2.0, button=3)
    canvas.emit("pointer_down", x="bad", y=2.0, button=1)

    assert [event.button for event in seen] == [1, 3, 2]
    assert all(event.target is element for event in seen)


def test_wheel_keeps_native_event() -> None:
    canvas = _Canvas()
    source = RenderCanvasEventSource(canvas=canvas)
    seen = []
    source.register_callback("wheel", seen.append)

    canvas.emit("wheel", x=3, y=4, dx=0.0, dy=-1.5)

    assert seen[0].delta == -1.5
    assert seen[0].native["event_type"] == "wheel"


def test_attribute_style_events_are_supported() -> None:
    canvas = _Canvas()
    source = RenderCanvasEventSource(canvas=canvas)
    seen = []
    source.register_callback("pointermove", seen.append)

    canvas.handlers["pointer_move"][0](SimpleNamespace(x=5, y=6, button=0))

    assert (seen[0].page_x, seen[0].page_y, seen[0].button) == (5.0, 6.0, 0)


def test_key_code_for_covers_named_and_function_keys() -> None:
    assert key_code_for("Z") == KeyCode.Z
    assert key_code_for("7") == KeyCode.NUM_7
    assert key_code_for(" ") == KeyCode.SPACE
    assert key_code_for("Escape") == KeyCode.ESCAPE
    assert key_code_for("F12") == KeyCode.F12
    assert key_code_for("F13") is None
    assert key_code_for("/") == KeyCode.FORWARD_SLASH


def test_controller_over_canvas_end_to_end() -> None:
    canvas = _Canvas()
    bus = RuntimeEventBus()
    seen: list[tuple[str, object]] = []
    for topic in ("keydown", "pointerdown", "pointerup", "clicked"):
        bus.subscribe(topic, lambda payload, topic=topic: seen.append((topic, payload)))
    controller = SurfaceInputController(
        RenderCanvasEventSource(canvas=canvas), bus=bus, config=InputConfig()
    )

    canvas.emit("key_down", key="q", modifiers=())
    canvas.emit("pointer_down", x=40, y=30, button=3)
    canvas.emit("pointer_up", x=40, y=30, button=3)

    assert controller.middle_down is False
    assert seen == [
        ("keydown", KeyPayload(int(KeyCode.Q))),
        ("pointerdown", PointerPayload(40, 30)),
        ("pointerup", PointerPayload(40, 30)),
        ("clicked", PointerPayload(40, 30)),
    ]

    controller.close()
    assert all(handlers == [] for handlers in canvas.handlers.values())


def test_create_rendercanvas_source_wraps_given_canvas() -> None:
    canvas = _Canvas()
    source = create_rendercanvas_source(canvas)
    assert source.canvas is canvas
    assert source.element == SurfaceElement()


def test_create_rendercanvas_source_builds_canvas_via_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[dict] = []

    class _AutoCanvas(_Canvas):
        def __init__(self, **kwargs) -> None:
            super().__init__()
            created.append(kwargs)

    rendercanvas_mod = ModuleType("rendercanvas")
    auto_mod = ModuleType("rendercanvas.auto")
    auto_mod.RenderCanvas = _AutoCanvas
    rendercanvas_mod.auto = auto_mod
    monkeypatch.setitem(sys.modules, "rendercanvas", rendercanvas_mod)
    monkeypatch.setitem(sys.modules, "rendercanvas.auto", auto_mod)

    source = create_rendercanvas_source(width=320, height=200, title="t")

    assert isinstance(source.canvas, _AutoCanvas)
    assert created == [{"size": (320, 200), "title": "t"}]
