"""Transaction store persisted in a JSON file."""

from dataclasses import replace
from datetime import datetime
import json
from pathlib import Path
from typing import Any

from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import Transaction
from src.domain.services.normalization import normalize_transaction_type
from src.domain.services.validation import infer_transaction_type
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import parse_iso_datetime
from src.utils.decimal_utils import coerce_decimal


def transaction_to_record(transaction: Transaction) -> dict[str, Any]:
    """Return the JSON-serializable form of a transaction.

    Amounts are written as strings to keep Decimal precision.
    """
    return {
        "id": transaction.id,
        "amount": str(transaction.amount),
        "type": transaction.type.value,
        "date": transaction.date.isoformat(),
        "description": transaction.description,
    }


def transaction_from_record(record: dict[str, Any]) -> Transaction:
    """Build a transaction from a JSON record.

    Accepts numeric or string amounts and date-only or full ISO dates.
    A missing type is inferred from the amount sign.
    """
    amount = coerce_decimal(record["amount"])
    raw_type = record.get("type")
    if raw_type:
        transaction_type = normalize_transaction_type(raw_type)
    else:
        transaction_type = infer_transaction_type(amount)
    return Transaction(
        id=str(record["id"]),
        amount=amount,
        date=parse_iso_datetime(record["date"]),
        type=transaction_type,
        description=record.get("description"),
    )


class JsonTransactionRepository(TransactionRepositoryPort):
    """Transaction store backed by a JSON array on disk.

    The file is re-read on every call; a missing file reads as empty.
    """

    def __init__(self, file_path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            file_path: Path of the JSON file holding the transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._file_path = Path(file_path)
        self._logger = logger or get_app_logger()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def find_in_range(
        self,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        return [tx for tx in self._read() if start <= tx.date <= end]

    def fetch_all(self) -> list[Transaction]:
        return self._read()

    def fetch_by_id(self, transaction_id: str) -> Transaction | None:
        for transaction in self._read():
            if transaction.id == transaction_id:
                return transaction
        return None

    def save(self, transaction: Transaction) -> None:
        transactions = self._read()
        transactions.append(transaction)
        self._write(transactions)

    def update(
        self,
        transaction_id: str,
        changes: dict[str, Any],
    ) -> Transaction | None:
        transactions = self._read()
        for index, transaction in enumerate(transactions):
            if transaction.id == transaction_id:
                updated = replace(transaction, **changes)
                transactions[index] = updated
                self._write(transactions)
                return updated
        return None

    def delete(self, transaction_id: str) -> bool:
        transactions = self._read()
        remaining = [tx for tx in transactions if tx.id != transaction_id]
        if len(remaining) == len(transactions):
            return False
        self._write(remaining)
        return True

    def _read(self) -> list[Transaction]:
        try:
            raw = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        if not raw.strip():
            return []
        records = json.loads(raw)
        if not isinstance(records, list):
            raise ValueError(
                f"Expected a JSON array of transactions in {self._file_path}"
            )
        return [transaction_from_record(record) for record in records]

    def _write(self, transactions: list[Transaction]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = [transaction_to_record(tx) for tx in transactions]
        self._file_path.write_text(
            json.dumps(payload, indent=2),
            encoding="utf-8",
        )
        self._logger.debug(
            f"Wrote {len(payload)} transactions to {self._file_path}"
        )


__all__ = [
    "JsonTransactionRepository",
    "transaction_to_record",
    "transaction_from_record",
]
