"""
Timezone utility functions for handling datetime conversions.

SQLite hands back naive datetimes even for timezone-aware columns, so
every timestamp read from storage goes through :func:`as_utc` before it is
compared or formatted.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(tz=UTC)


def as_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to timezone-aware UTC.

    Args:
        dt: Naive (assumed UTC) or aware datetime.

    Returns:
        Aware datetime in UTC.

    Example:
        >>> as_utc(datetime(2017, 1, 1))
        datetime.datetime(2017, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_post_date(value: str) -> datetime:
    """
    Parse the ``date`` header of a post file.

    Accepts ISO-8601 dates and datetimes such as ``2017-01-01`` or
    ``2017-01-01 00:00:00 +0800``. Naive values are taken as UTC.

    Raises:
        ValueError: If the value is not a recognizable date.
    """
    text = value.strip()
    # Jekyll writes "2017-01-01 00:00:00 +0800"; fromisoformat wants "+08:00"
    if len(text) > 6 and text[-5] in "+-" and text[-6] == " " and text[-4:].isdigit():
        text = f"{text[:-6]}{text[-5:-2]}:{text[-2:]}"
    return as_utc(datetime.fromisoformat(text))
