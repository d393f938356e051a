"""
Time Utilities

GameLayer returns ISO-8601 timestamps; all comparisons happen on
UTC-aware datetimes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

UTC = timezone.utc

TimeValue = Union[datetime, str, None]


def utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is UTC-aware.

    - If `dt` is naive, treat it as UTC.
    - If `dt` is timezone-aware, convert it to UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_timestamp(value: TimeValue) -> Optional[datetime]:
    """
    Parse an API timestamp into a UTC-aware datetime.

    Accepts datetimes and ISO-8601 strings (a trailing "Z" is allowed).
    Returns `None` for empty or unparseable values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        return None
