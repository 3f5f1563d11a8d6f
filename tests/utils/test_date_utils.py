"""Tests for datetime helpers."""

from datetime import date, datetime, timezone

import pytest

from src.utils.date_utils import parse_iso_datetime, to_local_naive


def test_parse_date_only_is_start_of_day() -> None:
    """Plain dates map to midnight."""
    assert parse_iso_datetime("2024-01-15") == datetime(2024, 1, 15)
    assert parse_iso_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15)


def test_parse_keeps_naive_datetimes() -> None:
    """Naive datetimes pass through unchanged."""
    assert parse_iso_datetime("2024-01-15T08:30:00") == datetime(
        2024, 1, 15, 8, 30
    )


def test_parse_converts_utc_suffix_to_local_naive() -> None:
    """A Z suffix is UTC and the result is naive local time."""
    expected = to_local_naive(datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc))

    parsed = parse_iso_datetime("2024-01-15T08:30:00Z")

    assert parsed == expected
    assert parsed.tzinfo is None


def test_parse_rejects_other_formats() -> None:
    """Non-ISO strings raise ValueError."""
    with pytest.raises(ValueError):
        parse_iso_datetime("15/01/2024")


@pytest.mark.parametrize("value", [None, 20240115])
def test_parse_rejects_non_string_values(value) -> None:
    """Values that are neither strings nor dates raise ValueError."""
    with pytest.raises(ValueError):
        parse_iso_datetime(value)
