"""Use case to compute the monthly asset snapshot."""

from src.application.ports.asset_repository import AssetRepositoryPort
from src.domain.models import MonthKey, MonthlyAssetSnapshot
from src.domain.services.finance import compute_monthly_asset_snapshot
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyAssetSnapshotUseCase:
    """Compute category totals and net worth for a month."""

    def __init__(
        self,
        asset_repository: AssetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            asset_repository: Port providing assets and their values.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._asset_repository = asset_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str, month: MonthKey) -> MonthlyAssetSnapshot:
        """Return the snapshot for month, compared with the month before.

        Args:
            owner_id: Owner whose assets are valued.
            month: Target month.

        Returns:
            MonthlyAssetSnapshot: Category breakdown and net worth.
        """
        assets = self._asset_repository.fetch_assets(owner_id)
        values = self._asset_repository.fetch_asset_values(
            owner_id,
            month.previous().start_date,
            month.next().start_date,
        )
        self._logger.info(
            f"Computing asset snapshot for {month.label()} "
            f"({len(assets)} assets, {len(values)} values)"
        )
        return compute_monthly_asset_snapshot(
            assets,
            values,
            month,
            logger=self._logger,
        )


__all__ = ["GetMonthlyAssetSnapshotUseCase"]
