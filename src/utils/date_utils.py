"""Helpers for datetime parsing."""

from datetime import date, datetime


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_iso_datetime(value: str | date | datetime) -> datetime:
    """Parse an ISO-8601 date or datetime into naive local time.

    Date-only values map to the start of that day. A trailing ``Z`` is read
    as UTC.

    Args:
        value: ISO string, date or datetime.

    Returns:
        datetime: Naive local datetime.

    Raises:
        ValueError: If the value is not an ISO-8601 string, date or datetime.
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")
    cleaned = value.strip()
    if cleaned.endswith(("Z", "z")):
        cleaned = f"{cleaned[:-1]}+00:00"
    return to_local_naive(datetime.fromisoformat(cleaned))


__all__ = ["to_local_naive", "parse_iso_datetime"]
