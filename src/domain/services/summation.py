"""Grouping and summation of transactions by period."""

from collections.abc import Iterable

from src.domain.models import GroupBy, GroupSummary, Transaction
from src.domain.services.normalization import normalize_group_by
from src.domain.services.periods import get_period_key
from src.utils.decimal_utils import sum_decimals


def group_and_sum(
    transactions: Iterable[Transaction],
    group_by: GroupBy | str,
) -> list[GroupSummary]:
    """Bucket transactions by period key and total each bucket.

    Buckets keep the order in which their key is first seen while scanning
    ``transactions``; no chronological sort is applied.

    Args:
        transactions: Transactions as returned by the store.
        group_by: Grouping unit.

    Returns:
        list[GroupSummary]: One summary per distinct period key.

    Raises:
        UnsupportedGroupBy: If the grouping unit is not recognized.
    """
    unit = normalize_group_by(group_by)
    buckets: dict[str, list[Transaction]] = {}
    for transaction in transactions:
        key = get_period_key(transaction.date, unit)
        buckets.setdefault(key, []).append(transaction)

    summaries: list[GroupSummary] = []
    for period, members in buckets.items():
        dates = [member.date for member in members]
        summaries.append(
            GroupSummary(
                period=period,
                total=sum_decimals(member.amount for member in members),
                count=len(members),
                start_date=min(dates),
                end_date=max(dates),
            )
        )
    return summaries


__all__ = ["group_and_sum"]
