"""
Datetime helpers for stored timestamps.

Stored times are compared against an aware "now". A stored time without a
UTC offset is taken to be UTC.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Read a stored timestamp.

    Args:
        value: A datetime, an ISO 8601 string, or None.

    Returns:
        An aware datetime, or None for empty values.

    Raises:
        ValueError: If a string is not ISO 8601.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str) and value:
        return ensure_utc(datetime.fromisoformat(value))
    return None
