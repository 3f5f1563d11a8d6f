"""Domain models package."""

from .summation import (
    DateWindow,
    GroupBy,
    GroupSummary,
    Period,
    SummationMode,
    SummationQuery,
)
from .transactions import Transaction, TransactionType

__all__ = [
    "DateWindow",
    "GroupBy",
    "GroupSummary",
    "Period",
    "SummationMode",
    "SummationQuery",
    "Transaction",
    "TransactionType",
]
