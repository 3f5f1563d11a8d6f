"""Domain models for period-based summation."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class GroupBy(str, Enum):
    """Granularity used to bucket transactions."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Period(str, Enum):
    """Named date ranges relative to the current instant."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "thisweek"
    LAST_WEEK = "lastweek"
    THIS_MONTH = "thismonth"
    LAST_MONTH = "lastmonth"
    THIS_YEAR = "thisyear"
    LAST_YEAR = "lastyear"


class SummationMode(str, Enum):
    """Sign filter applied before grouping."""

    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class SummationQuery:
    """Query for grouped totals.

    ``period`` takes precedence over ``start_date``/``end_date``.
    """

    group_by: GroupBy = GroupBy.MONTH
    period: Period | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True)
class DateWindow:
    """Concrete date range; both bounds are inclusive."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class GroupSummary:
    """Totals for one period bucket.

    Attributes:
        period: Period key, e.g. ``2024-03`` or ``2024-W12``.
        total: Signed sum of member amounts.
        count: Number of member transactions.
        start_date: Earliest member date.
        end_date: Latest member date.
    """

    period: str
    total: Decimal
    count: int
    start_date: datetime
    end_date: datetime


__all__ = [
    "GroupBy",
    "Period",
    "SummationMode",
    "SummationQuery",
    "DateWindow",
    "GroupSummary",
]
