"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.models import Transaction, TransactionType


def infer_transaction_type(amount: Decimal) -> TransactionType:
    """Return the type implied by the sign of an amount.

    Zero amounts are recorded as income.
    """
    return TransactionType.EXPENSE if amount < 0 else TransactionType.INCOME


def validate_transaction_sign(
    transaction: Transaction,
    logger: Logger,
) -> bool:
    """Warn when a transaction type contradicts the sign of its amount.

    Args:
        transaction: Transaction to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when type and sign agree.
    """
    if transaction.type is TransactionType.INCOME and transaction.amount < 0:
        logger.warning(
            f"Income transaction {transaction.id} has a negative amount: "
            f"{transaction.amount}"
        )
        return False
    if transaction.type is TransactionType.EXPENSE and transaction.amount > 0:
        logger.warning(
            f"Expense transaction {transaction.id} has a positive amount: "
            f"{transaction.amount}"
        )
        return False
    return True


__all__ = [
    "infer_transaction_type",
    "validate_transaction_sign",
]
