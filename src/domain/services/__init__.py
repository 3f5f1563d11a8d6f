"""Domain services package."""

from .normalization import (
    normalize_group_by,
    normalize_mode,
    normalize_period,
    normalize_transaction_type,
)
from .periods import (
    get_period_key,
    iso_week_key,
    resolve_date_window,
    resolve_period_window,
)
from .summation import group_and_sum
from .validation import (
    infer_transaction_type,
    validate_transaction_sign,
)

__all__ = [
    "normalize_group_by",
    "normalize_mode",
    "normalize_period",
    "normalize_transaction_type",
    "get_period_key",
    "iso_week_key",
    "resolve_date_window",
    "resolve_period_window",
    "group_and_sum",
    "infer_transaction_type",
    "validate_transaction_sign",
]
