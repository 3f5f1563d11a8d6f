"""Application use cases package."""

from .get_summation import GetSummationUseCase, GroupSummary
from .manage_transactions import ManageTransactionsUseCase

__all__ = [
    "GetSummationUseCase",
    "GroupSummary",
    "ManageTransactionsUseCase",
]
