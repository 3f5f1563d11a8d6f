"""In-memory transaction store seeded with sample data."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Any

from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import Transaction, TransactionType


def default_seed_transactions() -> list[Transaction]:
    """Return the sample transactions the in-memory store starts with."""
    return [
        Transaction(
            id="1",
            amount=Decimal("1000"),
            date=datetime(2025, 1, 1),
            type=TransactionType.INCOME,
            description="Salary",
        ),
        Transaction(
            id="2",
            amount=Decimal("-50"),
            date=datetime(2025, 1, 2),
            type=TransactionType.EXPENSE,
            description="Groceries",
        ),
        Transaction(
            id="3",
            amount=Decimal("-200"),
            date=datetime(2025, 1, 3),
            type=TransactionType.EXPENSE,
            description="Utilities",
        ),
    ]


class InMemoryTransactionRepository(TransactionRepositoryPort):
    """Transaction store kept in a process-local list.

    Results keep insertion order.
    """

    def __init__(self, transactions: Iterable[Transaction] | None = None):
        self._transactions: list[Transaction] = list(
            default_seed_transactions()
            if transactions is None
            else transactions
        )

    def find_in_range(
        self,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        return [tx for tx in self._transactions if start <= tx.date <= end]

    def fetch_all(self) -> list[Transaction]:
        return list(self._transactions)

    def fetch_by_id(self, transaction_id: str) -> Transaction | None:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def save(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def update(
        self,
        transaction_id: str,
        changes: dict[str, Any],
    ) -> Transaction | None:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                updated = replace(transaction, **changes)
                self._transactions[index] = updated
                return updated
        return None

    def delete(self, transaction_id: str) -> bool:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                del self._transactions[index]
                return True
        return False


__all__ = ["InMemoryTransactionRepository", "default_seed_transactions"]
