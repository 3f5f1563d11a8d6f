"""Domain models for stored transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Declared kind of a transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Transaction:
    """A dated, signed monetary movement.

    Attributes:
        id: Store identifier.
        amount: Signed amount; positive is income, negative is expense.
        date: Local calendar timestamp of the movement.
        type: Declared transaction type.
        description: Optional free-text label.
    """

    id: str
    amount: Decimal
    date: datetime
    type: TransactionType
    description: str | None = None


__all__ = ["Transaction", "TransactionType"]
