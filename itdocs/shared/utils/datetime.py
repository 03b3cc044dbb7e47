"""
UTC datetime utilities for consistent timezone handling.

All datetime values crossing the search core are timezone-aware UTC.
Rows from the database (SQLite returns naive values) and ISO strings from
caches or in-memory fixtures are normalized here.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_datetime(value: datetime | str | None) -> datetime | None:
    """
    Coerce a row value into a UTC-aware datetime.

    Accepts datetimes, ISO 8601 strings (a trailing "Z" is allowed) and
    None. Unparseable strings yield None rather than raising, so a bad
    timestamp never drops a row from search results.

    Args:
        value: Datetime, ISO string, or None

    Returns:
        UTC-aware datetime or None
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)
