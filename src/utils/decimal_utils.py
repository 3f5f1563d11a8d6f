"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that ``0.1`` stays ``Decimal("0.1")``.

    Args:
        value: Raw numeric value from storage, JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    # NaN and infinities cannot be compared against zero.
    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return result


def sum_decimals(values) -> Decimal:
    """Return the Decimal sum of an iterable of numeric values."""
    return sum((coerce_decimal(value) for value in values), start=Decimal("0"))


__all__ = ["coerce_decimal", "sum_decimals"]
