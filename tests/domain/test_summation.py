"""Tests for grouping and summation."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.errors import UnsupportedGroupBy
from src.domain.models import (
    GroupBy,
    GroupSummary,
    SummationMode,
    Transaction,
    TransactionType,
)
from src.domain.policies.sign_filters import filter_transactions
from src.domain.services.summation import group_and_sum


def _tx(amount: str, when: datetime, tx_id: str = "tx") -> Transaction:
    value = Decimal(amount)
    return Transaction(
        id=tx_id,
        amount=value,
        date=when,
        type=TransactionType.EXPENSE if value < 0 else TransactionType.INCOME,
    )


def test_monthly_scenario() -> None:
    """Transactions are grouped and totalled per month."""
    transactions = [
        _tx("100", datetime(2024, 1, 15), "a"),
        _tx("-50", datetime(2024, 1, 20), "b"),
        _tx("200", datetime(2024, 2, 10), "c"),
    ]

    result = group_and_sum(transactions, GroupBy.MONTH)

    assert result == [
        GroupSummary(
            period="2024-01",
            total=Decimal("50"),
            count=2,
            start_date=datetime(2024, 1, 15),
            end_date=datetime(2024, 1, 20),
        ),
        GroupSummary(
            period="2024-02",
            total=Decimal("200"),
            count=1,
            start_date=datetime(2024, 2, 10),
            end_date=datetime(2024, 2, 10),
        ),
    ]


@pytest.mark.parametrize("group_by", list(GroupBy))
def test_empty_input_yields_empty_list(group_by) -> None:
    """No transactions means no groups."""
    assert group_and_sum([], group_by) == []


def test_groups_keep_first_seen_order() -> None:
    """Group order follows the input order, not chronology."""
    transactions = [
        _tx("5", datetime(2024, 3, 1)),
        _tx("7", datetime(2024, 1, 1)),
        _tx("11", datetime(2024, 3, 9)),
        _tx("13", datetime(2024, 2, 1)),
    ]

    result = group_and_sum(transactions, GroupBy.MONTH)

    assert [group.period for group in result] == [
        "2024-03",
        "2024-01",
        "2024-02",
    ]
    assert result[0].total == Decimal("16")


def test_total_is_conserved_and_signs_are_kept() -> None:
    """Group totals add up to the sum of all amounts."""
    transactions = [
        _tx("12.50", datetime(2023, 5, 2)),
        _tx("-40.25", datetime(2023, 5, 3)),
        _tx("-3", datetime(2024, 7, 1)),
        _tx("0", datetime(2025, 1, 1)),
    ]

    result = group_and_sum(transactions, GroupBy.DAY)

    assert sum(group.total for group in result) == sum(
        tx.amount for tx in transactions
    )
    assert result[1].total == Decimal("-40.25")


def test_year_grouping_counts_distinct_years() -> None:
    """Grouping by year yields one group per distinct year."""
    transactions = [
        _tx("1", datetime(2022, 6, 1)),
        _tx("1", datetime(2024, 6, 1)),
        _tx("1", datetime(2022, 1, 1)),
        _tx("1", datetime(2023, 12, 31)),
    ]

    result = group_and_sum(transactions, GroupBy.YEAR)

    assert [group.period for group in result] == ["2022", "2024", "2023"]
    assert result[0].count == 2


def test_identical_timestamps_collapse_into_one_group() -> None:
    """Same-instant transactions share a group with equal bounds."""
    moment = datetime(2024, 4, 4, 9, 15)
    transactions = [_tx("10", moment, "a"), _tx("-4", moment, "b")]

    (group,) = group_and_sum(transactions, GroupBy.DAY)

    assert group.count == 2
    assert group.start_date == group.end_date == moment
    assert group.total == Decimal("6")


def test_iso_week_merges_across_year_boundary() -> None:
    """Dates in the same ISO week merge even across December/January."""
    transactions = [
        _tx("30", datetime(2024, 12, 30)),
        _tx("20", datetime(2025, 1, 1)),
        _tx("5", datetime(2025, 1, 6)),
    ]

    result = group_and_sum(transactions, GroupBy.WEEK)

    assert [(g.period, g.count) for g in result] == [
        ("2025-W01", 2),
        ("2025-W02", 1),
    ]
    assert result[0].start_date == datetime(2024, 12, 30)
    assert result[0].end_date == datetime(2025, 1, 1)


def test_iso_week_splits_different_weeks_at_year_end() -> None:
    """2023-12-30 and 2024-01-01 fall in different ISO weeks."""
    transactions = [
        _tx("1", datetime(2023, 12, 30)),
        _tx("1", datetime(2024, 1, 1)),
    ]

    result = group_and_sum(transactions, "week")

    assert [group.period for group in result] == ["2023-W52", "2024-W01"]


def test_zero_amounts_only_count_in_all_mode() -> None:
    """Zero amounts are neither income nor expense."""
    transactions = [
        _tx("0", datetime(2024, 1, 1)),
        _tx("25", datetime(2024, 1, 2)),
        _tx("-15", datetime(2024, 1, 3)),
    ]

    everything = group_and_sum(
        filter_transactions(transactions, SummationMode.ALL),
        GroupBy.MONTH,
    )
    income = group_and_sum(
        filter_transactions(transactions, SummationMode.INCOME),
        GroupBy.MONTH,
    )
    expense = group_and_sum(
        filter_transactions(transactions, SummationMode.EXPENSE),
        GroupBy.MONTH,
    )

    assert everything[0].count == 3
    assert income[0].count == 1
    assert income[0].total == Decimal("25")
    assert expense[0].count == 1
    assert expense[0].total == Decimal("-15")


def test_unsupported_group_by_raises() -> None:
    """An unknown grouping unit is a client error."""
    with pytest.raises(UnsupportedGroupBy):
        group_and_sum([_tx("1", datetime(2024, 1, 1))], "INVALID")


def test_grouping_is_idempotent() -> None:
    """Repeated calls on the same data give the same output."""
    transactions = [
        _tx("3", datetime(2024, 1, 1)),
        _tx("-9", datetime(2024, 8, 1)),
    ]

    assert group_and_sum(transactions, GroupBy.WEEK) == group_and_sum(
        transactions,
        GroupBy.WEEK,
    )
