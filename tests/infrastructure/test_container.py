"""Tests for the composition root."""

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

from src.application.use_cases.get_summation import GetSummationUseCase
from src.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from src.domain.models import SummationQuery
from src.infrastructure import container
from src.infrastructure import settings as settings_module
from src.infrastructure.clock import FixedClock, SystemClock
from src.infrastructure.in_memory_transaction_repository import (
    InMemoryTransactionRepository,
)
from src.infrastructure.json_transaction_repository import (
    JsonTransactionRepository,
)
from src.infrastructure.sqlalchemy_transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def _configure(monkeypatch, backend: str, file_path: Path | None = None):
    monkeypatch.setattr(
        settings_module.dotenv,
        "load_dotenv",
        lambda: None,
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(container, "_memory_repository", None)
    monkeypatch.setenv("FINANCE_BACKEND", backend)
    if file_path is not None:
        monkeypatch.setenv("TRANSACTIONS_FILE", str(file_path))


def test_build_transaction_repository_honors_backend(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """Settings select the repository implementation."""
    _configure(monkeypatch, "memory")
    assert isinstance(
        container.build_transaction_repository(),
        InMemoryTransactionRepository,
    )

    _configure(monkeypatch, "json", tmp_path / "tx.json")
    assert isinstance(
        container.build_transaction_repository(),
        JsonTransactionRepository,
    )

    _configure(monkeypatch, "sqlalchemy")
    assert isinstance(
        container.build_transaction_repository(db_port=MagicMock()),
        SqlAlchemyTransactionRepository,
    )


def test_build_summation_use_case_wires_clock(monkeypatch) -> None:
    """The summation use case gets the system clock by default."""
    _configure(monkeypatch, "memory")

    use_case = container.build_summation_use_case()

    assert isinstance(use_case, GetSummationUseCase)
    assert isinstance(use_case._clock, SystemClock)


def test_build_use_cases_share_injected_repository(monkeypatch) -> None:
    """Explicit repositories and clocks are passed through."""
    _configure(monkeypatch, "memory")
    repository = InMemoryTransactionRepository()
    clock = FixedClock(datetime(2025, 1, 31))

    summation = container.build_summation_use_case(repository, clock)
    transactions = container.build_transactions_use_case(repository)

    assert isinstance(transactions, ManageTransactionsUseCase)
    transactions.add(amount=-20, date=datetime(2025, 1, 20))
    result = summation.expenses(SummationQuery())
    assert [(g.period, g.count) for g in result] == [("2025-01", 3)]

def test_memory_backend_is_shared_across_use_cases(monkeypatch) -> None:
    """A transaction added through one use case is visible to the next."""
    _configure(monkeypatch, "memory")

    added = container.build_transactions_use_case().add(
        amount="42",
        date=datetime(2025, 1, 5),
    )
    listed = container.build_transactions_use_case().list_all()
    summation = container.build_summation_use_case(
        clock=FixedClock(datetime(2025, 1, 31)),
    )
    income = summation.income(SummationQuery(period="thismonth"))

    assert added.id in [tx.id for tx in listed]
    assert [(g.period, g.total, g.count) for g in income] == [
        ("2025-01", Decimal("1042"), 2)
    ]
    assert (
        container.build_transaction_repository()
        is container.build_transaction_repository()
    )
