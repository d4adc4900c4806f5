"""Use case to compute monthly income and expense over a rolling window."""

from zoneinfo import ZoneInfo

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_TIMEZONE
from src.domain.models import MonthKey, MonthlyLedgerStats
from src.domain.services.ledger import compute_monthly_ledger_stats
from src.domain.services.months import rolling_month_window, window_bounds
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyLedgerStatsUseCase:
    """Compute income, expense and net per month for N consecutive months."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        timezone: ZoneInfo | str = DEFAULT_TIMEZONE,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing transaction reads.
            logger: Optional logger compatible with logging.Logger-like API.
            timezone: Reference zone for date-to-month mapping.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone

    def execute(
        self,
        owner_id: str,
        anchor: MonthKey,
        months: int = 12,
        ending: bool = True,
    ) -> list[MonthlyLedgerStats]:
        """Return one bucket per month of the window, zero-filled.

        Args:
            owner_id: Owner whose transactions are aggregated.
            anchor: Month the window ends at (or starts from).
            months: Window size.
            ending: When True the anchor is the window's last month.

        Returns:
            list[MonthlyLedgerStats]: Chronological monthly buckets.
        """
        window = rolling_month_window(anchor, months, ending=ending)
        start_date, end_date = window_bounds(window)
        transactions = self._ledger_repository.fetch_transactions(
            owner_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for "
            f"{window[0].label()}..{window[-1].label()}"
        )
        return compute_monthly_ledger_stats(
            transactions,
            window,
            self._timezone,
        )


__all__ = ["GetMonthlyLedgerStatsUseCase"]
