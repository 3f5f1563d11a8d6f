"""Query-string parsing and JSON shaping for summation requests."""

from datetime import datetime
from typing import Any

from src.domain.errors import InvalidDateError
from src.domain.models import GroupSummary, SummationQuery
from src.domain.services.normalization import (
    normalize_group_by,
    normalize_period,
)
from src.utils.date_utils import parse_iso_datetime


def _parse_date(value: str | None) -> datetime | None:
    """Parse an optional ISO date string.

    Raises:
        InvalidDateError: If the value is not ISO-8601.
    """
    if value is None or not value.strip():
        return None
    try:
        return parse_iso_datetime(value)
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def parse_summation_query(
    group_by: str | None = None,
    period: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> SummationQuery:
    """Build a typed query from raw request parameters.

    Args:
        group_by: ``day``, ``week``, ``month`` or ``year``; month if empty.
        period: Optional named period such as ``lastmonth``.
        start_date: ISO date, used only when ``period`` is empty.
        end_date: ISO date, used only when ``period`` is empty.

    Returns:
        SummationQuery: Validated query.

    Raises:
        UnsupportedGroupBy: If ``group_by`` is not recognized.
        UnsupportedPeriod: If ``period`` is not recognized.
        InvalidDateError: If a date is not ISO-8601.
    """
    return SummationQuery(
        group_by=normalize_group_by(group_by),
        period=normalize_period(period),
        start_date=_parse_date(start_date),
        end_date=_parse_date(end_date),
    )


def serialize_summary(summary: GroupSummary) -> dict[str, Any]:
    """Return the response shape of one group summary."""
    return {
        "period": summary.period,
        "total": float(summary.total),
        "count": summary.count,
        "startDate": summary.start_date.isoformat(),
        "endDate": summary.end_date.isoformat(),
    }


def serialize_summaries(summaries: list[GroupSummary]) -> list[dict[str, Any]]:
    """Return the response shape of a summation result, order preserved."""
    return [serialize_summary(summary) for summary in summaries]


__all__ = [
    "parse_summation_query",
    "serialize_summary",
    "serialize_summaries",
]
