"""
Timezone utilities.

Timestamps are persisted as naive UTC datetimes. Cities carry an IANA
timezone name which is validated here and used to render local times.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the storage representation)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to naive UTC.

    Args:
        dt: A datetime object (naive assumed UTC, or timezone-aware)

    Returns:
        naive datetime in UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt

    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def is_valid_timezone(name: str) -> bool:
    """Check whether name is a known IANA timezone (e.g. "America/Chicago")."""
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def local_time(name: str, dt: datetime = None) -> datetime:
    """
    Convert a stored UTC datetime to the local time of a timezone.

    Args:
        name: IANA timezone name
        dt: naive UTC datetime; defaults to now

    Returns:
        timezone-aware datetime in the requested zone
    """
    if dt is None:
        dt = utcnow()
    return dt.replace(tzinfo=timezone.utc).astimezone(ZoneInfo(name))
