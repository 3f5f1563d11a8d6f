"""Tests for the GetSummationUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_summation import GetSummationUseCase
from src.domain.errors import UnsupportedGroupBy, UnsupportedPeriod
from src.domain.models import (
    GroupBy,
    Period,
    SummationMode,
    SummationQuery,
    Transaction,
    TransactionType,
)
from src.infrastructure.clock import FixedClock


NOW = datetime(2025, 6, 15, 10, 0)


def _tx(amount: str, when: datetime) -> Transaction:
    value = Decimal(amount)
    return Transaction(
        id=f"{amount}@{when.isoformat()}",
        amount=value,
        date=when,
        type=TransactionType.EXPENSE if value < 0 else TransactionType.INCOME,
    )


def _use_case(rows: list[Transaction]):
    repository = MagicMock()
    repository.find_in_range.return_value = rows
    use_case = GetSummationUseCase(
        transaction_repository=repository,
        clock=FixedClock(NOW),
        logger=MagicMock(),
    )
    return use_case, repository


ROWS = [
    _tx("100", datetime(2024, 1, 15)),
    _tx("-50", datetime(2024, 1, 20)),
    _tx("0", datetime(2024, 1, 21)),
    _tx("200", datetime(2024, 2, 10)),
]


def test_total_groups_by_month_by_default() -> None:
    """Default query groups every transaction by month."""
    use_case, repository = _use_case(ROWS)

    result = use_case.total(SummationQuery())

    assert [(g.period, g.total, g.count) for g in result] == [
        ("2024-01", Decimal("50"), 3),
        ("2024-02", Decimal("200"), 1),
    ]
    repository.find_in_range.assert_called_once_with(
        datetime(1970, 1, 1),
        NOW,
    )


def test_income_and_expenses_filter_by_sign() -> None:
    """Income and expense views drop zero and opposite-sign amounts."""
    use_case, _ = _use_case(ROWS)

    income = use_case.income(SummationQuery())
    expenses = use_case.expenses(SummationQuery())

    assert [(g.period, g.total, g.count) for g in income] == [
        ("2024-01", Decimal("100"), 1),
        ("2024-02", Decimal("200"), 1),
    ]
    assert [(g.period, g.total, g.count) for g in expenses] == [
        ("2024-01", Decimal("-50"), 1),
    ]


def test_execute_accepts_mode_strings() -> None:
    """String modes map to the same filters as the shortcuts."""
    use_case, _ = _use_case(ROWS)

    assert use_case.execute(SummationQuery(), "expenses") == (
        use_case.execute(SummationQuery(), SummationMode.EXPENSE)
    )


def test_named_period_is_resolved_with_the_clock() -> None:
    """Relative periods are resolved against the injected clock."""
    use_case, repository = _use_case([])

    result = use_case.total(
        SummationQuery(group_by=GroupBy.DAY, period=Period.LAST_MONTH)
    )

    assert result == []
    repository.find_in_range.assert_called_once_with(
        datetime(2025, 5, 1),
        datetime(2025, 5, 31, 23, 59, 59, 999000),
    )


def test_invalid_group_by_fails_before_fetching() -> None:
    """Client errors are raised without touching the store."""
    use_case, repository = _use_case(ROWS)

    with pytest.raises(UnsupportedGroupBy):
        use_case.total(SummationQuery(group_by="INVALID"))

    repository.find_in_range.assert_not_called()


def test_invalid_period_raises() -> None:
    """Unknown periods raise UnsupportedPeriod."""
    use_case, _ = _use_case(ROWS)

    with pytest.raises(UnsupportedPeriod):
        use_case.total(SummationQuery(period="someday"))


def test_store_errors_propagate_unchanged() -> None:
    """A failing fetch aborts the query with the original error."""
    use_case, repository = _use_case([])
    repository.find_in_range.side_effect = OSError("disk unavailable")

    with pytest.raises(OSError, match="disk unavailable"):
        use_case.total(SummationQuery())


def test_identical_queries_give_identical_results() -> None:
    """The use case keeps no state between calls."""
    use_case, repository = _use_case(ROWS)
    query = SummationQuery(group_by=GroupBy.WEEK)

    assert use_case.total(query) == use_case.total(query)
    assert repository.find_in_range.call_count == 2
