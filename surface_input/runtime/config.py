"""Centralized configuration ownership for input translation."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

DEFAULT_TEXT_ENTRY_TAGS: tuple[str, ...] = ("INPUT", "TEXTAREA")


@dataclass(frozen=True, slots=True)
class InputConfig:
    enabled: bool = True
    trace_enabled: bool = False
    text_entry_tags: tuple[str, ...] = DEFAULT_TEXT_ENTRY_TAGS
    log_level: str = "INFO"
    log_file: str | None = None


_INPUT_CONFIG: ContextVar[InputConfig | None] = ContextVar("surface_input_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _csv(name: str, *, env: Mapping[str, str] | None = None) -> tuple[str, ...]:
    raw = _raw(name, env=env)
    if raw is None:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("SURFACE_INPUT_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_input_config(*, env: Mapping[str, str] | None = None) -> InputConfig:
    tags = _csv("SURFACE_INPUT_TEXT_ENTRY_TAGS", env=env)
    return InputConfig(
        enabled=_flag("SURFACE_INPUT_ENABLED", True, env=env),
        trace_enabled=_flag("SURFACE_INPUT_TRACE_ENABLED", False, env=env),
        text_entry_tags=tuple(tag.upper() for tag in tags) if tags else DEFAULT_TEXT_ENTRY_TAGS,
        log_level=resolve_log_level_name(env=env),
        log_file=(_raw("SURFACE_INPUT_LOG_FILE", env=env) or "").strip() or None,
    )


def initialize_input_config(*, env: Mapping[str, str] | None = None) -> InputConfig:
    config = load_input_config(env=env)
    _INPUT_CONFIG.set(config)
    return config


def set_input_config(config: InputConfig) -> InputConfig:
    _INPUT_CONFIG.set(config)
    return config


def get_input_config() -> InputConfig:
    config = _INPUT_CONFIG.get()
    if config is not None:
        return config
    return initialize_input_config()


__all__ = [
    "DEFAULT_TEXT_ENTRY_TAGS",
    "InputConfig",
    "get_input_config",
    "initialize_input_config",
    "load_input_config",
    "resolve_log_level_name",
    "set_input_config",
]
