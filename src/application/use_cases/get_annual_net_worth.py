"""Use case to compute the month-by-month net worth of a year."""

from zoneinfo import ZoneInfo

from src.application.ports.asset_repository import AssetRepositoryPort
from src.domain.constants import DEFAULT_TIMEZONE
from src.domain.models import AnnualNetWorthSeries, MonthKey
from src.domain.services.finance import compute_annual_net_worth_series
from src.domain.services.months import current_month
from src.infrastructure.logging.logger import get_app_logger


class GetAnnualNetWorthUseCase:
    """Compute monthly net worth points for a target year.

    Points run from January to December, or to the current month when the
    target year is the current year. Future years produce no points.
    """

    def __init__(
        self,
        asset_repository: AssetRepositoryPort,
        logger=None,
        timezone: ZoneInfo | str = DEFAULT_TIMEZONE,
    ) -> None:
        """Initialize the use case.

        Args:
            asset_repository: Port providing assets and their values.
            logger: Optional logger compatible with logging.Logger-like API.
            timezone: Reference zone used to find the current month.
        """
        self._asset_repository = asset_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone

    def execute(
        self,
        owner_id: str,
        year: int,
        today: MonthKey | None = None,
    ) -> AnnualNetWorthSeries:
        """Return the annual series for year.

        Args:
            owner_id: Owner whose assets are valued.
            year: Target year.
            today: Current month; defaults to now in the reference zone.

        Returns:
            AnnualNetWorthSeries: Monthly points and year-over-year figures.
        """
        today = today or current_month(self._timezone)
        last_month = self._last_month(year, today)
        baseline = MonthKey(year - 1, 12)
        end = MonthKey(year, last_month) if last_month else baseline

        assets = self._asset_repository.fetch_assets(owner_id)
        values = self._asset_repository.fetch_asset_values(
            owner_id,
            baseline.start_date,
            end.next().start_date,
        )
        self._logger.info(
            f"Computing net worth series for {year} "
            f"through month {last_month} ({len(values)} values)"
        )
        return compute_annual_net_worth_series(
            assets,
            values,
            year,
            last_month,
            logger=self._logger,
        )

    @staticmethod
    def _last_month(year: int, today: MonthKey) -> int:
        if year < today.year:
            return 12
        if year == today.year:
            return today.month
        return 0


__all__ = ["GetAnnualNetWorthUseCase"]
