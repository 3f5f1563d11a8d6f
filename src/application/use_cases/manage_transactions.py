"""Use case for creating, reading, updating and deleting transactions."""

from datetime import datetime
from decimal import Decimal
import uuid

from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.errors import TransactionNotFound
from src.domain.models import Transaction, TransactionType
from src.domain.services.normalization import normalize_transaction_type
from src.domain.services.validation import (
    infer_transaction_type,
    validate_transaction_sign,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import parse_iso_datetime
from src.utils.decimal_utils import coerce_decimal


UPDATABLE_FIELDS = ("amount", "date", "type", "description")


class ManageTransactionsUseCase:
    """Transaction management on top of the repository port."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transaction storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def add(
        self,
        amount: Decimal | int | float | str,
        date: datetime | str,
        type: TransactionType | str | None = None,
        description: str | None = None,
        transaction_id: str | None = None,
    ) -> Transaction:
        """Create and persist a transaction.

        Args:
            amount: Signed amount.
            date: Transaction timestamp or ISO-8601 string.
            type: Declared type; inferred from the amount sign when omitted.
            description: Optional label.
            transaction_id: Optional id; a uuid4 is generated when omitted.

        Returns:
            Transaction: The stored transaction.

        Raises:
            ValueError: If the amount, date or type cannot be parsed.
        """
        value = coerce_decimal(amount)
        transaction = Transaction(
            id=transaction_id or str(uuid.uuid4()),
            amount=value,
            date=parse_iso_datetime(date),
            type=(
                normalize_transaction_type(type)
                if type is not None
                else infer_transaction_type(value)
            ),
            description=description,
        )
        validate_transaction_sign(transaction, self._logger)
        self._transaction_repository.save(transaction)
        self._logger.info(
            f"Transaction {transaction.id} added: amount={transaction.amount}"
        )
        return transaction

    def list_all(self) -> list[Transaction]:
        """Return all stored transactions."""
        return self._transaction_repository.fetch_all()

    def get(self, transaction_id: str) -> Transaction:
        """Return one transaction.

        Raises:
            TransactionNotFound: If the id is unknown.
        """
        transaction = self._transaction_repository.fetch_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFound(transaction_id)
        return transaction

    def update(self, transaction_id: str, **changes) -> Transaction:
        """Apply field changes to a transaction.

        Args:
            transaction_id: Id of the transaction to update.
            **changes: Any of amount, date, type, description.

        Returns:
            Transaction: The updated transaction.

        Raises:
            ValueError: If a change targets an unknown field or holds an
                unparsable value.
            TransactionNotFound: If the id is unknown.
        """
        unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValueError(
                f"Unsupported transaction fields: {', '.join(unknown)}"
            )
        normalized = dict(changes)
        if "amount" in normalized:
            normalized["amount"] = coerce_decimal(normalized["amount"])
        if "date" in normalized:
            normalized["date"] = parse_iso_datetime(normalized["date"])
        if normalized.get("type") is not None:
            normalized["type"] = normalize_transaction_type(normalized["type"])
        updated = self._transaction_repository.update(
            transaction_id,
            normalized,
        )
        if updated is None:
            raise TransactionNotFound(transaction_id)
        validate_transaction_sign(updated, self._logger)
        self._logger.info(
            f"Transaction {transaction_id} updated: "
            f"{', '.join(sorted(normalized))}"
        )
        return updated

    def delete(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            TransactionNotFound: If the id is unknown.
        """
        if not self._transaction_repository.delete(transaction_id):
            raise TransactionNotFound(transaction_id)
        self._logger.info(f"Transaction {transaction_id} deleted")


__all__ = ["ManageTransactionsUseCase", "UPDATABLE_FIELDS"]
