"""Display helpers — date formatting and text truncation.

None of these raise on bad input; they return a sentinel string instead.
"""

from datetime import datetime, timezone

DEFAULT_TRUNCATE_LENGTH = 150

# Accepted in addition to ISO-8601
_FALLBACK_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y")


def parse_date(value: str | datetime | None) -> datetime | None:
    """Parse a post date, returning None if it is missing or not a date.

    Accepts ISO-8601 (``2024-01-15``, ``2024-01-15T10:00:00.000Z``,
    ``2024-01-15 10:00:00+02:00``) and ``January 15, 2024`` style strings.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def date_sort_key(value: str | datetime | None) -> float | None:
    """POSIX timestamp for ordering, treating naive dates as UTC."""
    dt = parse_date(value)
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


def format_date(value: str | datetime | None) -> str:
    """Format as ``January 15, 2024``."""
    if not value:
        return "Date not available"
    dt = parse_date(value)
    if dt is None:
        return "Invalid date"
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def format_date_short(value: str | datetime | None) -> str:
    """Format as ``Jan 15, 2024``, or an empty string."""
    dt = parse_date(value) if value else None
    if dt is None:
        return ""
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def truncate_text(
    text: str | None, max_length: int = DEFAULT_TRUNCATE_LENGTH
) -> str:
    """Cut ``text`` to ``max_length`` characters and append ``...``.

    Counts characters, not words, so a word may be split.
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."
