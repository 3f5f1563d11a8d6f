"""Factory helpers to select the transaction store backend."""

import os
from pathlib import Path

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.infrastructure.in_memory_transaction_repository import (
    InMemoryTransactionRepository,
)
from src.infrastructure.json_transaction_repository import (
    JsonTransactionRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sqlalchemy_transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def create_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
    logger=None,
    backend: str | None = None,
    transactions_file: str | Path | None = None,
) -> TransactionRepositoryPort:
    """Return a transaction repository implementation based on configuration.

    Args:
        db_port: Port providing the finance engine (sqlalchemy backend).
        logger: Optional logger compatible with logging.Logger-like API.
        backend: Optional backend override (memory, json or sqlalchemy).
        transactions_file: Optional path override for the json backend.

    Returns:
        TransactionRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the selected backend is missing its configuration.
        ValueError: If the backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = (
        backend or os.getenv("FINANCE_BACKEND", "memory")
    ).strip().lower()

    if selected_backend == "memory":
        return InMemoryTransactionRepository()

    if selected_backend == "json":
        raw_path = transactions_file or os.getenv("TRANSACTIONS_FILE")
        if not raw_path:
            raise RuntimeError(
                "JSON backend requires a TRANSACTIONS_FILE path."
            )
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            resolved_logger.warning(
                f"Transactions file does not exist yet at {path}"
            )
        return JsonTransactionRepository(path, logger=resolved_logger)

    if selected_backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError(
                "SQLAlchemy backend requires a database adapter."
            )
        return SqlAlchemyTransactionRepository(db_port)

    raise ValueError(
        "Unsupported transaction backend: "
        f"{selected_backend}. Expected memory, json or sqlalchemy."
    )


__all__ = ["create_transaction_repository"]
