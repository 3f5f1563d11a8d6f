"""Use case to compute grouped totals, income and expenses."""

from src.application.ports.clock import ClockPort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import GroupSummary, SummationMode, SummationQuery
from src.domain.policies.sign_filters import filter_transactions
from src.domain.services.normalization import (
    normalize_group_by,
    normalize_mode,
)
from src.domain.services.periods import resolve_date_window
from src.domain.services.summation import group_and_sum
from src.infrastructure.logging.logger import get_app_logger


class GetSummationUseCase:
    """Aggregate stored transactions by day, week, month or year."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transactions by date range.
            clock: Time source used for relative periods and open end dates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(
        self,
        query: SummationQuery,
        mode: SummationMode | str = SummationMode.ALL,
    ) -> list[GroupSummary]:
        """Return one summary per period for the query window.

        Args:
            query: Grouping unit and either a named period or explicit dates.
            mode: ``all``, ``income`` (amount > 0) or ``expense`` (amount < 0).

        Returns:
            list[GroupSummary]: Summaries in first-seen period order.

        Raises:
            UnsupportedGroupBy: If the grouping unit is not recognized.
            UnsupportedPeriod: If the named period is not recognized.
        """
        resolved_mode = normalize_mode(mode)
        group_by = normalize_group_by(query.group_by)
        window = resolve_date_window(query, self._clock.now())
        transactions = self._transaction_repository.find_in_range(
            window.start,
            window.end,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions between "
            f"{window.start.isoformat()} and {window.end.isoformat()}"
        )
        selected = filter_transactions(transactions, resolved_mode)
        summaries = group_and_sum(selected, group_by)
        self._logger.info(
            f"Summation computed: mode={resolved_mode.value}, "
            f"group_by={group_by.value}, groups={len(summaries)}"
        )
        return summaries

    def total(self, query: SummationQuery) -> list[GroupSummary]:
        """Return signed totals of every transaction."""
        return self.execute(query, SummationMode.ALL)

    def income(self, query: SummationQuery) -> list[GroupSummary]:
        """Return totals of positive transactions only."""
        return self.execute(query, SummationMode.INCOME)

    def expenses(self, query: SummationQuery) -> list[GroupSummary]:
        """Return totals of negative transactions only."""
        return self.execute(query, SummationMode.EXPENSE)


__all__ = ["GetSummationUseCase", "GroupSummary"]
