"""Composition root for wiring infrastructure adapters."""

from typing import Optional

from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.application.use_cases.get_summation import GetSummationUseCase
from src.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from src.infrastructure.clock import SystemClock
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.transaction_repository_factory import (
    create_transaction_repository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_clock() -> ClockPort:
    """Return the system clock."""
    return SystemClock()


_memory_repository: Optional[TransactionRepositoryPort] = None


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the configured transaction repository.

    The in-memory store is created once per process so that every use case
    built here sees the same transactions.
    """
    global _memory_repository
    settings = FinanceSettings.from_env()
    if settings.backend == "memory":
        if _memory_repository is None:
            _memory_repository = create_transaction_repository(
                logger=get_app_logger(),
                backend=settings.backend,
            )
        return _memory_repository
    resolved_db = None
    if settings.backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
    return create_transaction_repository(
        resolved_db,
        logger=get_app_logger(),
        backend=settings.backend,
        transactions_file=settings.transactions_file,
    )


def build_summation_use_case(
    repository: TransactionRepositoryPort | None = None,
    clock: ClockPort | None = None,
) -> GetSummationUseCase:
    """Return the summation use case wired to configured adapters."""
    return GetSummationUseCase(
        transaction_repository=repository or build_transaction_repository(),
        clock=clock or build_clock(),
        logger=get_app_logger(),
    )


def build_transactions_use_case(
    repository: TransactionRepositoryPort | None = None,
) -> ManageTransactionsUseCase:
    """Return the transaction management use case."""
    return ManageTransactionsUseCase(
        transaction_repository=repository or build_transaction_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_clock",
    "build_transaction_repository",
    "build_summation_use_case",
    "build_transactions_use_case",
]
