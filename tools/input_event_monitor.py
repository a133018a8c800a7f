"""Open a canvas and log every normalized input event it produces."""

from __future__ import annotations

import argparse
import dataclasses
import logging

from surface_input.api.input_events import (
    TOPIC_CLICKED,
    TOPIC_DOUBLE_CLICK,
    TOPIC_ENABLED,
    TOPIC_KEY_DOWN,
    TOPIC_KEY_UP,
    TOPIC_POINTER_DOWN,
    TOPIC_POINTER_MOVE,
    TOPIC_POINTER_UP,
    TOPIC_WHEEL,
)
from surface_input.api.input import create_canvas_input
from surface_input.api.keycodes import KeyCode, key_name
from surface_input.runtime.config import get_input_config
from surface_input.runtime.logging import configure_logging, logging_config_for, shutdown_logging

_LOG = logging.getLogger("tools.input_event_monitor")

_TOPICS = (
    TOPIC_KEY_DOWN,
    TOPIC_KEY_UP,
    TOPIC_POINTER_DOWN,
    TOPIC_POINTER_UP,
    TOPIC_DOUBLE_CLICK,
    TOPIC_WHEEL,
    TOPIC_CLICKED,
    TOPIC_ENABLED,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--moves", action="store_true", help="also log pointermove events")
    parser.add_argument("--json", action="store_true", help="emit JSON log lines")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    log_config = logging_config_for(get_input_config())
    configure_logging(
        dataclasses.replace(log_config, console_format="json" if args.json else "text")
    )
    import rendercanvas.auto as rc_auto

    canvas = rc_auto.RenderCanvas(size=(args.width, args.height), title="input monitor")
    controller = create_canvas_input(canvas)
    topics = _TOPICS + ((TOPIC_POINTER_MOVE,) if args.moves else ())
    for topic in topics:
        controller.subscribe(topic, lambda payload, topic=topic: _LOG.info("%s %r", topic, payload))

    def _toggle(event: dict) -> None:
        # Listens on the canvas itself so the toggle keeps working while gated.
        if event.get("key") == "Escape":
            controller.set_enabled(not controller.enabled)
            _LOG.info("toggled via %s", key_name(KeyCode.ESCAPE))

    canvas.add_event_handler(_toggle, "key_down")
    try:
        rc_auto.loop.run()
    finally:
        controller.close()
        shutdown_logging()


if __name__ == "__main__":
    main()
