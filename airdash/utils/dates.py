"""Date utilities."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_day(value: object) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` day identifier, returning None when malformed."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def format_day_label(value: str) -> str:
    """Render a forecast day as ``Mon, Jan 5``; unknown formats pass through."""
    parsed = parse_day(value)
    if parsed is None:
        return value
    return f"{parsed:%a, %b} {parsed.day}"


def format_hour(dt: datetime) -> str:
    return dt.strftime("%H:%M")


def parse_timestamp(value: object) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
