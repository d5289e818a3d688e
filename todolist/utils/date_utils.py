"""
Centralized date/time utilities
All timestamps are stored as ISO-8601 strings and compared in UTC
"""

from datetime import datetime, timezone
from typing import Optional, Union


def get_current_datetime() -> datetime:
    """
    Get current datetime in UTC

    Returns:
        Current datetime object with UTC timezone
    """
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """
    Format datetime as ISO-8601 in UTC with millisecond precision

    Naive datetimes are read as UTC.
    Example: "2025-01-01T00:00:00.000Z"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_current_iso() -> str:
    """Current moment as an ISO-8601 UTC string"""
    return to_iso(get_current_datetime())


def parse_iso_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse ISO-8601 string into an aware datetime

    Args:
        value: ISO string ("Z" suffix accepted), datetime or None

    Returns:
        Aware datetime in UTC, or None if value is empty or unparseable
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip()
        if not text:
            return None
        try:
            dt = datetime.fromisoformat(text.replace('Z', '+00:00'))
        except ValueError:
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
