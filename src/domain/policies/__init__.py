"""Domain policies package."""

from .sign_filters import filter_transactions, matches_mode

__all__ = ["filter_transactions", "matches_mode"]
