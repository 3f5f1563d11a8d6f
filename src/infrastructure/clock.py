"""Clock adapters for resolving relative periods."""

from datetime import datetime

from src.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the local system time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(ClockPort):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


__all__ = ["SystemClock", "FixedClock"]
