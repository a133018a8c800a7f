"""Shared exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Bounded set tolerated when talking to host event sources.
RecoverableHostErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_HOST_ERRORS: RecoverableHostErrors = (
    RuntimeError,
    ValueError,
    TypeError,
    KeyError,
    AttributeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a tolerated recoverable exception."""
    logger.log(level, message, *args, exc_info=True)
