"""Date window resolution and period keys."""

from datetime import date, datetime, timedelta

from src.domain.constants import END_OF_DAY, EPOCH
from src.domain.errors import UnsupportedPeriod
from src.domain.models import DateWindow, GroupBy, Period, SummationQuery
from src.domain.services.normalization import (
    normalize_group_by,
    normalize_period,
)


def _start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def _end_of_day(day: date) -> datetime:
    return datetime.combine(day, END_OF_DAY)


def resolve_period_window(period: Period | str, now: datetime) -> DateWindow:
    """Return the window covered by a named period.

    Weeks run Monday to Sunday; the ``this*`` periods end at the end of
    today, the ``last*`` periods cover the full previous unit.

    Args:
        period: Named period to resolve.
        now: Current local instant.

    Returns:
        DateWindow: Inclusive start and end of the period.

    Raises:
        UnsupportedPeriod: If the period is not recognized.
    """
    resolved = normalize_period(period)
    if resolved is None:
        raise UnsupportedPeriod(period)
    today = now.date()
    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)

    if resolved is Period.TODAY:
        return DateWindow(_start_of_day(today), _end_of_day(today))
    if resolved is Period.YESTERDAY:
        yesterday = today - timedelta(days=1)
        return DateWindow(_start_of_day(yesterday), _end_of_day(yesterday))
    if resolved is Period.THIS_WEEK:
        return DateWindow(_start_of_day(week_start), _end_of_day(today))
    if resolved is Period.LAST_WEEK:
        last_week_start = week_start - timedelta(days=7)
        return DateWindow(
            _start_of_day(last_week_start),
            _end_of_day(last_week_start + timedelta(days=6)),
        )
    if resolved is Period.THIS_MONTH:
        return DateWindow(_start_of_day(month_start), _end_of_day(today))
    if resolved is Period.LAST_MONTH:
        last_month_end = month_start - timedelta(days=1)
        return DateWindow(
            _start_of_day(last_month_end.replace(day=1)),
            _end_of_day(last_month_end),
        )
    if resolved is Period.THIS_YEAR:
        return DateWindow(
            _start_of_day(date(today.year, 1, 1)),
            _end_of_day(today),
        )
    if resolved is Period.LAST_YEAR:
        return DateWindow(
            _start_of_day(date(today.year - 1, 1, 1)),
            _end_of_day(date(today.year - 1, 12, 31)),
        )
    raise UnsupportedPeriod(period)


def resolve_date_window(query: SummationQuery, now: datetime) -> DateWindow:
    """Map a query to a concrete inclusive window.

    Args:
        query: Summation query; ``period`` wins over explicit dates.
        now: Current local instant.

    Returns:
        DateWindow: Window to fetch transactions for.
    """
    if query.period is not None:
        return resolve_period_window(query.period, now)
    return DateWindow(
        start=query.start_date or EPOCH,
        end=query.end_date or now,
    )


def iso_week_key(value: date) -> str:
    """Return the ``YYYY-Www`` ISO-8601 week label of a date.

    The year is the ISO week-year, so 2024-12-30 is ``2025-W01``.
    """
    iso_year, iso_week, _ = value.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def get_period_key(value: datetime, group_by: GroupBy | str) -> str:
    """Return the bucket label of a transaction date.

    Args:
        value: Transaction date.
        group_by: Grouping unit.

    Returns:
        str: ``YYYY-MM-DD``, ``YYYY-Www``, ``YYYY-MM`` or ``YYYY``.

    Raises:
        UnsupportedGroupBy: If the grouping unit is not recognized.
    """
    unit = normalize_group_by(group_by)
    if unit is GroupBy.DAY:
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    if unit is GroupBy.WEEK:
        return iso_week_key(value)
    if unit is GroupBy.MONTH:
        return f"{value.year:04d}-{value.month:02d}"
    return f"{value.year:04d}"


__all__ = [
    "resolve_period_window",
    "resolve_date_window",
    "iso_week_key",
    "get_period_key",
]
