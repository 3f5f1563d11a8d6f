"""Sign-based transaction filters for income and expense views."""

from collections.abc import Iterable

from src.domain.models import SummationMode, Transaction


def matches_mode(transaction: Transaction, mode: SummationMode) -> bool:
    """Return True when the transaction belongs to the mode's view.

    Zero amounts belong to neither the income nor the expense view.
    """
    if mode is SummationMode.INCOME:
        return transaction.amount > 0
    if mode is SummationMode.EXPENSE:
        return transaction.amount < 0
    return True


def filter_transactions(
    transactions: Iterable[Transaction],
    mode: SummationMode,
) -> list[Transaction]:
    """Return the transactions kept by ``mode``, preserving order."""
    if mode is SummationMode.ALL:
        return list(transactions)
    return [tx for tx in transactions if matches_mode(tx, mode)]


__all__ = ["matches_mode", "filter_transactions"]
