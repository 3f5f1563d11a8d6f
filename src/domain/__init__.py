"""Domain package for business rules and core models."""

from .constants import END_OF_DAY, EPOCH
from .errors import (
    InvalidDateError,
    SummationError,
    TransactionNotFound,
    UnsupportedGroupBy,
    UnsupportedPeriod,
)
from .models import (
    DateWindow,
    GroupBy,
    GroupSummary,
    Period,
    SummationMode,
    SummationQuery,
    Transaction,
    TransactionType,
)
from .policies import filter_transactions, matches_mode
from .services import (
    get_period_key,
    group_and_sum,
    iso_week_key,
    normalize_group_by,
    normalize_mode,
    normalize_period,
    normalize_transaction_type,
    resolve_date_window,
    resolve_period_window,
)

__all__ = [
    "END_OF_DAY",
    "EPOCH",
    "InvalidDateError",
    "SummationError",
    "TransactionNotFound",
    "UnsupportedGroupBy",
    "UnsupportedPeriod",
    "DateWindow",
    "GroupBy",
    "GroupSummary",
    "Period",
    "SummationMode",
    "SummationQuery",
    "Transaction",
    "TransactionType",
    "filter_transactions",
    "matches_mode",
    "get_period_key",
    "group_and_sum",
    "iso_week_key",
    "normalize_group_by",
    "normalize_mode",
    "normalize_period",
    "normalize_transaction_type",
    "resolve_date_window",
    "resolve_period_window",
]
