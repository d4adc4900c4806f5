"""Use case to list, create, rename and delete tracked assets."""

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.asset_repository import AssetRepositoryPort
from src.domain.constants import ASSET_CATEGORIES
from src.domain.models import Asset, OperationResult
from src.domain.services.normalization import normalize_code, normalize_name
from src.domain.services.validation import require_choice
from src.infrastructure.logging.logger import get_app_logger


class ManageAssetsUseCase:
    """Asset administration for one owner."""

    def __init__(
        self,
        asset_repository: AssetRepositoryPort,
        logger=None,
    ) -> None:
        self._asset_repository = asset_repository
        self._logger = logger or get_app_logger()

    def list_assets(self, owner_id: str) -> list[Asset]:
        """Return assets ordered by name."""
        return self._asset_repository.fetch_assets(owner_id)

    def list_by_category(self, owner_id: str) -> dict[str, list[Asset]]:
        """Return assets keyed by category, in category order.

        Every category is present, empty when the owner has no asset in it.
        """
        grouped: dict[str, list[Asset]] = {code: [] for code in ASSET_CATEGORIES}
        for asset in self.list_assets(owner_id):
            grouped.setdefault(asset.category, []).append(asset)
        return grouped

    def create(self, owner_id: str, name: str, category: str) -> OperationResult:
        """Create an asset.

        Args:
            owner_id: Owner of the new asset.
            name: Display name.
            category: One of the asset categories.

        Returns:
            OperationResult: Outcome with a user-facing message.
        """
        clean_name = normalize_name(name)
        if clean_name is None:
            return OperationResult.fail("Asset name is required.")
        try:
            clean_category = require_choice(
                normalize_code(category),
                ASSET_CATEGORIES,
                "asset category",
            )
        except ValueError as exc:
            return OperationResult.fail(str(exc))

        try:
            asset = self._asset_repository.create_asset(
                owner_id,
                clean_name,
                clean_category,
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to create asset {clean_name}: {exc}")
            return OperationResult.fail(
                "The asset could not be created. Please try again."
            )
        self._logger.info(
            f"Created asset {asset.id} ({clean_category}) '{clean_name}'"
        )
        return OperationResult.ok(f"Created asset '{clean_name}'.")

    def rename(self, owner_id: str, asset_id: str, name: str) -> OperationResult:
        clean_name = normalize_name(name)
        if clean_name is None:
            return OperationResult.fail("Asset name is required.")
        try:
            updated = self._asset_repository.rename_asset(
                owner_id,
                asset_id,
                clean_name,
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to rename asset {asset_id}: {exc}")
            return OperationResult.fail(
                "The asset could not be renamed. Please try again."
            )
        if not updated:
            return OperationResult.fail(f"Unknown asset: {asset_id}.")
        return OperationResult.ok(f"Renamed asset to '{clean_name}'.")

    def delete(self, owner_id: str, asset_id: str) -> OperationResult:
        """Delete an asset together with all of its values."""
        try:
            deleted = self._asset_repository.delete_asset(owner_id, asset_id)
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to delete asset {asset_id}: {exc}")
            return OperationResult.fail(
                "The asset could not be deleted. Please try again."
            )
        if not deleted:
            return OperationResult.fail(f"Unknown asset: {asset_id}.")
        self._logger.info(f"Deleted asset {asset_id}")
        return OperationResult.ok("Deleted asset.", affected=deleted)


__all__ = ["ManageAssetsUseCase"]
