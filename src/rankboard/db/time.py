# src/rankboard/db/time.py
"""Time utilities for database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def as_naive_utc(value: datetime) -> datetime:
    """Normalise a timestamp for ordering.

    SQLite hands back naive datetimes while freshly created rows still carry
    the aware value they were built with; comparing the two raises.
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value
