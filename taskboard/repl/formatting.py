"""
FILE: taskboard/repl/formatting.py
PURPOSE: Date formatting for task creation times
EXPORTS:
  - format_relative_date(value) -> str
DEPENDENCIES:
  - datetime (stdlib)
  - typing (type hints)
NOTES:
  - Accepts datetime objects or ISO-8601 strings
  - Recent times are relative ("3 minutes ago"), older ones are dates
"""

from datetime import datetime, timedelta
from typing import Optional, Union

DateLike = Union[datetime, str, None]


def _coerce(value: DateLike) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return None


def format_relative_date(value: DateLike, now: Optional[datetime] = None) -> str:
    """
    Convert a timestamp to human-readable relative time.

    Returns:
        - "-" for missing dates
        - "just now" (< 1 minute ago)
        - "5 minutes ago" / "3 hours ago"
        - "yesterday"
        - "2 days ago" (< 1 week ago)
        - "Jan 15" (same year) or "Jan 15, 2024"
        - the original text if it could not be parsed
    """
    dt = _coerce(value)
    if dt is None:
        return "-" if not value else str(value)

    if now is None:
        now = datetime.now(dt.tzinfo) if dt.tzinfo else datetime.now()

    seconds = (now - dt).total_seconds()

    # Also catches future timestamps
    if seconds < 60:
        return "just now"

    if seconds < 3600:
        minutes = int(seconds / 60)
        return f"{minutes} minute{'s' if minutes != 1 else ''} ago"

    if seconds < 86400 and dt.date() == now.date():
        hours = int(seconds / 3600)
        return f"{hours} hour{'s' if hours != 1 else ''} ago"

    if dt.date() == now.date() - timedelta(days=1):
        return "yesterday"

    days = (now.date() - dt.date()).days
    if days < 7:
        return f"{days} day{'s' if days != 1 else ''} ago"

    if dt.year == now.year:
        return dt.strftime("%b %d")

    return dt.strftime("%b %d, %Y")
