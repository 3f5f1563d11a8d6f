"""SQLAlchemy-backed transaction store."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    Numeric,
    String,
    Table,
    delete,
    insert,
    select,
    update,
)

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import Transaction, TransactionType
from src.utils.decimal_utils import coerce_decimal


metadata = MetaData()

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("amount", Numeric(18, 4, asdecimal=True), nullable=False),
    Column("occurred_at", DateTime(), nullable=False, index=True),
    Column("type", String(16), nullable=False),
    Column("description", String(255), nullable=True),
)

_COLUMN_BY_FIELD = {
    "amount": "amount",
    "date": "occurred_at",
    "type": "type",
    "description": "description",
}


def _row_to_transaction(row) -> Transaction:
    return Transaction(
        id=row.id,
        amount=coerce_decimal(row.amount),
        date=row.occurred_at,
        type=TransactionType(row.type),
        description=row.description,
    )


def _to_row_values(changes: dict[str, Any]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field, value in changes.items():
        if field == "type" and isinstance(value, TransactionType):
            value = value.value
        values[_COLUMN_BY_FIELD[field]] = value
    return values


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository storing transactions in the ``transactions`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port
        self._prepared = False

    def prepare_storage(self) -> None:
        """Ensure the transactions table exists."""
        engine = self._db_port.get_finance_engine()
        metadata.create_all(engine, tables=[transactions_table])
        self._prepared = True

    def find_in_range(
        self,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        query = (
            select(transactions_table)
            .where(transactions_table.c.occurred_at >= start)
            .where(transactions_table.c.occurred_at <= end)
            .order_by(
                transactions_table.c.occurred_at,
                transactions_table.c.id,
            )
        )
        return self._fetch(query)

    def fetch_all(self) -> list[Transaction]:
        query = select(transactions_table).order_by(
            transactions_table.c.occurred_at,
            transactions_table.c.id,
        )
        return self._fetch(query)

    def fetch_by_id(self, transaction_id: str) -> Transaction | None:
        query = select(transactions_table).where(
            transactions_table.c.id == transaction_id
        )
        rows = self._fetch(query)
        return rows[0] if rows else None

    def save(self, transaction: Transaction) -> None:
        self._ensure_prepared()
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(transactions_table).values(
                    id=transaction.id,
                    amount=transaction.amount,
                    occurred_at=transaction.date,
                    type=transaction.type.value,
                    description=transaction.description,
                )
            )

    def update(
        self,
        transaction_id: str,
        changes: dict[str, Any],
    ) -> Transaction | None:
        self._ensure_prepared()
        values = _to_row_values(changes)
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            if values:
                result = conn.execute(
                    update(transactions_table)
                    .where(transactions_table.c.id == transaction_id)
                    .values(**values)
                )
                if result.rowcount == 0:
                    return None
            row = conn.execute(
                select(transactions_table).where(
                    transactions_table.c.id == transaction_id
                )
            ).first()
        return _row_to_transaction(row) if row is not None else None

    def delete(self, transaction_id: str) -> bool:
        self._ensure_prepared()
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            result = conn.execute(
                delete(transactions_table).where(
                    transactions_table.c.id == transaction_id
                )
            )
        return result.rowcount > 0

    def _fetch(self, query) -> list[Transaction]:
        self._ensure_prepared()
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_row_to_transaction(row) for row in rows]

    def _ensure_prepared(self) -> None:
        if not self._prepared:
            self.prepare_storage()


__all__ = [
    "SqlAlchemyTransactionRepository",
    "transactions_table",
    "metadata",
]
