"""Port for reading the current instant."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Time source used to resolve relative periods."""

    def now(self) -> datetime:
        """Return the current naive local datetime."""


__all__ = ["ClockPort"]
