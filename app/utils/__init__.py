"""Utility modules for the application."""

from app.utils.timezone import (
    utcnow,
    to_naive_utc,
    is_valid_timezone,
    local_time
)

__all__ = [
    "utcnow",
    "to_naive_utc",
    "is_valid_timezone",
    "local_time"
]
