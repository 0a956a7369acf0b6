"""Time-related helpers.

This module centralizes helpers for obtaining timestamps in UTC and for
converting between aware ``datetime`` values and the integer epoch
timestamps stored inside revision snapshots.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return the current UTC time as an aware ``datetime`` instance."""

    return datetime.now(timezone.utc)


def to_timestamp(value: Optional[datetime]) -> Optional[int]:
    """Return *value* as whole seconds since the epoch, or ``None``.

    Naive datetimes are interpreted as UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def from_timestamp(value: Optional[int | float]) -> Optional[datetime]:
    """Return an aware UTC ``datetime`` for the epoch timestamp *value*."""

    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


__all__ = ["utc_now", "to_timestamp", "from_timestamp"]
