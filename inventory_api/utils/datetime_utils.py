"""
Date/time helpers.

Categories and suppliers keep native UTC datetimes; inventory items keep
their dates as ISO-8601 strings with millisecond precision and a "Z" suffix.
"""
from datetime import datetime, timezone


def as_utc(dt: datetime) -> datetime:
    """Convert dt to tz-aware UTC. Naive values are treated as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_now() -> str:
    """Current UTC time as e.g. "2024-09-04T21:39:36.605Z"."""
    return to_iso_string(utc_now())


def to_iso_string(dt: datetime) -> str:
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")
