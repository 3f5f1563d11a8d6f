"""Port for reading and writing transactions."""

from datetime import datetime
from typing import Any, Protocol

from src.domain.models import Transaction


class TransactionRepositoryPort(Protocol):
    """Port exposing the transaction store.

    Summation only needs ``find_in_range``; the remaining methods back the
    transaction management use case.
    """

    def find_in_range(
        self,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        """Return transactions dated within ``[start, end]``, in any order."""

    def fetch_all(self) -> list[Transaction]:
        """Return every stored transaction."""

    def fetch_by_id(self, transaction_id: str) -> Transaction | None:
        """Return one transaction, or None when the id is unknown."""

    def save(self, transaction: Transaction) -> None:
        """Persist a new transaction."""

    def update(
        self,
        transaction_id: str,
        changes: dict[str, Any],
    ) -> Transaction | None:
        """Apply field changes and return the updated transaction."""

    def delete(self, transaction_id: str) -> bool:
        """Remove a transaction; return False when the id is unknown."""


__all__ = ["TransactionRepositoryPort"]
