"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .transaction_repository import TransactionRepositoryPort

__all__ = [
    "ClockPort",
    "DatabaseEnginePort",
    "TransactionRepositoryPort",
]
