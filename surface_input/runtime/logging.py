"""Logging setup driven by the input configuration."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from surface_input.api.logging import LoggingConfig
from surface_input.runtime.config import InputConfig, get_input_config

PACKAGE_LOGGER_NAME = "surface_input"

_QUEUE_LISTENER: QueueListener | None = None
_RESERVED_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {k: v for k, v in vars(record).items() if k not in _RESERVED_RECORD_FIELDS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def logging_config_for(config: InputConfig) -> LoggingConfig:
    """Derive the logging pipeline from input settings.

    Tracing lowers only the package logger to DEBUG so per-event lines show up
    without turning on DEBUG for every other library.
    """
    return LoggingConfig(
        level_name=config.log_level,
        console_format="text",
        file_path=config.log_file,
        file_format="json",
        package_level_name="DEBUG" if config.trace_enabled else None,
    )


def configure_logging(config: LoggingConfig) -> None:
    """Install console and optional file handlers on the root logger.

    With a file configured, records go through a queue so file writes happen
    off the event-dispatch thread.
    """
    global _QUEUE_LISTENER

    shutdown_logging()

    handlers: list[logging.Handler] = [_console_handler(config.console_format)]
    if config.file_path:
        handlers.append(_file_handler(Path(config.file_path), config.file_format))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level(config.level_name))
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(
        _level(config.package_level_name) if config.package_level_name else logging.NOTSET
    )

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Flush and stop the file-streaming listener, if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    for handler in _QUEUE_LISTENER.handlers:
        handler.close()
    _QUEUE_LISTENER = None


def setup_logging(config: InputConfig | None = None) -> None:
    """Configure logging from input settings unless handlers already exist."""
    if logging.getLogger().handlers:
        return
    configure_logging(logging_config_for(config if config is not None else get_input_config()))


def _level(name: str) -> int:
    return getattr(logging, name.strip().upper(), logging.INFO)


def _console_handler(kind: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _file_handler(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "JsonFormatter",
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "logging_config_for",
    "setup_logging",
    "shutdown_logging",
]
