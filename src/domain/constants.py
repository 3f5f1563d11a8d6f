"""Domain constants for period resolution and summation."""

from datetime import datetime, time

# Lower bound used when a query has no explicit start date.
EPOCH = datetime(1970, 1, 1)

# Inclusive end of a calendar day (23:59:59.999).
END_OF_DAY = time(23, 59, 59, 999000)


__all__ = ["EPOCH", "END_OF_DAY"]
