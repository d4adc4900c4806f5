"""Use case to record an asset's value for a month."""

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.asset_repository import AssetRepositoryPort
from src.domain.models import MonthKey, OperationResult
from src.domain.services.validation import validate_value_sign
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import parse_amount


class UpsertAssetValueUseCase:
    """Create or overwrite the (asset, month) value."""

    def __init__(
        self,
        asset_repository: AssetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            asset_repository: Port providing asset and value storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._asset_repository = asset_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: str,
        asset_id: str,
        year: int,
        month: int,
        amount,
    ) -> OperationResult:
        """Store the value under the month marker of (year, month).

        Args:
            owner_id: Owner of the asset.
            asset_id: Asset whose value is recorded.
            year: Calendar year.
            month: Calendar month (1-12).
            amount: New value; may be negative.

        Returns:
            OperationResult: Outcome with a user-facing message.
        """
        try:
            month_key = MonthKey(int(year), int(month))
        except (TypeError, ValueError):
            return OperationResult.fail(f"Invalid month: {year}-{month}.")
        parsed = parse_amount(amount)
        if parsed is None:
            return OperationResult.fail(
                f"Amount is not a valid number: {amount!r}."
            )

        try:
            asset = self._asset_repository.fetch_asset(owner_id, asset_id)
            if asset is None:
                return OperationResult.fail(f"Unknown asset: {asset_id}.")
            validate_value_sign(asset.category, parsed, self._logger)
            self._asset_repository.upsert_asset_value(
                asset_id,
                month_key.start_date,
                parsed,
            )
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Failed to store value for asset={asset_id} "
                f"month={month_key.label()}: {exc}"
            )
            return OperationResult.fail(
                "The value could not be saved. Please try again."
            )

        self._logger.info(
            f"Stored value {parsed} for asset={asset_id} "
            f"month={month_key.label()}"
        )
        return OperationResult.ok(
            f"Saved {asset.name} for {month_key.label()}."
        )


__all__ = ["UpsertAssetValueUseCase"]
