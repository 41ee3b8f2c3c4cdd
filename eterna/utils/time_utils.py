"""
Centralized time utilities.

All timestamps are timezone-aware UTC datetimes in memory and ISO-8601
strings with a Z suffix in DynamoDB, so that stored values sort and compare
as text.
"""

from __future__ import annotations

from datetime import datetime, timezone

SECONDS_PER_HOUR = 3600.0


def utc_now() -> datetime:
    """Return current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def to_iso_z(dt: datetime) -> str:
    """
    Format a datetime as ISO string with Z suffix.

    Format: 2026-02-14T12:34:56.789012Z
    """
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")


def parse_iso_datetime(iso_string: str) -> datetime:
    """
    Parse ISO datetime string to timezone-aware datetime.

    Handles both Z suffix and +00:00 offset; naive values are assumed UTC.
    """
    if iso_string.endswith("Z"):
        iso_string = iso_string[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(iso_string))


def ensure_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def hours_between(earlier: datetime, later: datetime) -> float:
    """Fractional hours from earlier to later (negative if later < earlier)."""
    return (ensure_utc(later) - ensure_utc(earlier)).total_seconds() / SECONDS_PER_HOUR
