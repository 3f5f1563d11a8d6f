"""Domain errors for summation queries and transaction management."""


class SummationError(ValueError):
    """Base class for client-input errors raised by the summation engine."""


class UnsupportedGroupBy(SummationError):
    """Raised when a grouping unit is not one of day/week/month/year."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"Unsupported groupBy value: {value!r}. "
            "Expected one of day, week, month, year."
        )


class UnsupportedPeriod(SummationError):
    """Raised when a named period is not recognized."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"Unsupported period value: {value!r}. Expected one of today, "
            "yesterday, thisweek, lastweek, thismonth, lastmonth, "
            "thisyear, lastyear."
        )


class InvalidDateError(SummationError):
    """Raised when a query date string cannot be parsed."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"Invalid date {value!r}. Expected an ISO-8601 date or datetime."
        )


class TransactionNotFound(LookupError):
    """Raised when a transaction id does not exist in the store."""

    def __init__(self, transaction_id: str) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


__all__ = [
    "SummationError",
    "UnsupportedGroupBy",
    "UnsupportedPeriod",
    "InvalidDateError",
    "TransactionNotFound",
]
