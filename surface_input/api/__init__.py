"""Public surface input API contracts."""

from surface_input.api.devices import CallbackHandle, DeviceEventSource
from surface_input.api.events import EventBus, Subscription, create_event_bus
from surface_input.api.input import SurfaceInput, create_canvas_input, create_surface_input
from surface_input.api.input_events import (
    EnabledPayload,
    KeyPayload,
    PointerPayload,
    RawKeyEvent,
    RawPointerEvent,
    RawWheelEvent,
    SurfaceElement,
    WheelPayload,
)
from surface_input.api.keycodes import KeyCode, key_name
from surface_input.api.logging import LoggingConfig

__all__ = [
    "CallbackHandle",
    "DeviceEventSource",
    "EnabledPayload",
    "EventBus",
    "KeyCode",
    "KeyPayload",
    "LoggingConfig",
    "PointerPayload",
    "RawKeyEvent",
    "RawPointerEvent",
    "RawWheelEvent",
    "Subscription",
    "SurfaceElement",
    "SurfaceInput",
    "WheelPayload",
    "create_canvas_input",
    "create_event_bus",
    "create_surface_input",
    "key_name",
]
