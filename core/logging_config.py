"""Logging helpers for the entry revision subsystem."""

from __future__ import annotations

import logging
from typing import Any, Optional


REVISION_LOGGER_NAME = "entry_revisions"
_EVENT_PREFIX = "entry_revisions."


def get_revision_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child of the ``entry_revisions`` logger.

    The parent logger defaults to INFO so that revision lifecycle records are
    emitted even when the root logger is left at WARNING.
    """

    parent = logging.getLogger(REVISION_LOGGER_NAME)
    if parent.level == logging.NOTSET:
        parent.setLevel(logging.INFO)

    if not name:
        return parent
    return parent.getChild(name)


def _event_name(event: str) -> str:
    if event.startswith(_EVENT_PREFIX):
        return event
    return f"{_EVENT_PREFIX}{event}"


def log_revision_info(logger: logging.Logger, message: str, event: str, **extra_attrs: Any) -> None:
    """Log revision info with structured context.

    Args:
        logger: Logger instance to use.
        message: Info message.
        event: Event identifier for categorization.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        'event': _event_name(event),
        **extra_attrs
    }

    logger.info(message, extra=extra)


def log_revision_warning(logger: logging.Logger, message: str, event: str, **extra_attrs: Any) -> None:
    """Log a revision warning with structured context."""
    extra = {
        'event': _event_name(event),
        **extra_attrs
    }

    logger.warning(message, extra=extra)


def log_revision_error(
    logger: logging.Logger,
    message: str,
    event: str,
    exc_info: bool = True,
    **extra_attrs: Any,
) -> None:
    """Log revision error with structured context.

    Args:
        logger: Logger instance to use.
        message: Error message.
        event: Event identifier for categorization.
        exc_info: Whether to include exception information.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        'event': _event_name(event),
        **extra_attrs
    }

    logger.error(message, exc_info=exc_info, extra=extra)


__all__ = [
    "REVISION_LOGGER_NAME",
    "get_revision_logger",
    "log_revision_error",
    "log_revision_info",
    "log_revision_warning",
]
