"""Timestamp helpers.

SQLite hands datetimes back without tzinfo even when they were written
timezone-aware, so anything doing arithmetic on stored values goes through
``as_utc`` first.
"""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def days_since(value: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed between ``value`` and ``now`` (default: current time)."""
    now = as_utc(now) if now is not None else utcnow()
    return (now - as_utc(value)).days
