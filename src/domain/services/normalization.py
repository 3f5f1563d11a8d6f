"""Domain normalization helpers for query enums."""

from src.domain.errors import UnsupportedGroupBy, UnsupportedPeriod
from src.domain.models import GroupBy, Period, SummationMode, TransactionType


def normalize_group_by(value: GroupBy | str | None) -> GroupBy:
    """Normalize a grouping unit.

    Args:
        value: Enum member, raw string (case-insensitive) or None.

    Returns:
        GroupBy: Parsed grouping unit; ``month`` when value is empty.

    Raises:
        UnsupportedGroupBy: If the value is not a known grouping unit.
    """
    if isinstance(value, GroupBy):
        return value
    if value is None:
        return GroupBy.MONTH
    if not isinstance(value, str):
        raise UnsupportedGroupBy(value)
    cleaned = value.strip().lower()
    if not cleaned:
        return GroupBy.MONTH
    try:
        return GroupBy(cleaned)
    except ValueError as exc:
        raise UnsupportedGroupBy(value) from exc


def normalize_period(value: Period | str | None) -> Period | None:
    """Normalize a named period.

    Args:
        value: Enum member, raw string (case-insensitive) or None.

    Returns:
        Period | None: Parsed period, or None when value is empty.

    Raises:
        UnsupportedPeriod: If the value is not a known period.
    """
    if isinstance(value, Period):
        return value
    if value is None:
        return None
    if not isinstance(value, str):
        raise UnsupportedPeriod(value)
    cleaned = value.strip().lower()
    if not cleaned:
        return None
    try:
        return Period(cleaned)
    except ValueError as exc:
        raise UnsupportedPeriod(value) from exc


def normalize_mode(value: SummationMode | str) -> SummationMode:
    """Normalize a summation mode; ``expenses`` is accepted as an alias."""
    if isinstance(value, SummationMode):
        return value
    cleaned = str(value).strip().lower()
    if cleaned in ("total", ""):
        return SummationMode.ALL
    if cleaned == "expenses":
        return SummationMode.EXPENSE
    try:
        return SummationMode(cleaned)
    except ValueError as exc:
        raise ValueError(
            f"Unsupported summation mode: {value!r}. "
            "Expected total, income or expenses."
        ) from exc


def normalize_transaction_type(
    value: TransactionType | str,
) -> TransactionType:
    """Normalize a transaction type; raw strings are case-insensitive.

    Raises:
        ValueError: If the value is not INCOME or EXPENSE.
    """
    if isinstance(value, TransactionType):
        return value
    cleaned = str(value).strip().upper()
    try:
        return TransactionType(cleaned)
    except ValueError as exc:
        raise ValueError(
            f"Unsupported transaction type: {value!r}. "
            "Expected INCOME or EXPENSE."
        ) from exc


__all__ = [
    "normalize_group_by",
    "normalize_period",
    "normalize_mode",
    "normalize_transaction_type",
]
