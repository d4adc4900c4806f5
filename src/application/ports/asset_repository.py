"""Port for reading and writing tracked assets and their monthly values."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models import Asset, AssetValue


class AssetRepositoryPort(Protocol):
    """Port exposing owner-scoped access to assets and values."""

    def fetch_assets(self, owner_id: str) -> list[Asset]:
        """Return the owner's assets ordered by name."""

    def fetch_asset(self, owner_id: str, asset_id: str) -> Asset | None:
        """Return one asset, or None when it does not belong to the owner."""

    def create_asset(self, owner_id: str, name: str, category: str) -> Asset:
        """Insert an asset and return it."""

    def rename_asset(self, owner_id: str, asset_id: str, name: str) -> int:
        """Rename an asset and return the number of rows updated."""

    def delete_asset(self, owner_id: str, asset_id: str) -> int:
        """Delete an asset with its values; return assets deleted."""

    def fetch_asset_values(
        self,
        owner_id: str,
        start_date: date,
        end_date: date,
    ) -> list[AssetValue]:
        """Return values dated in [start_date, end_date)."""

    def upsert_asset_value(
        self,
        asset_id: str,
        value_date: date,
        amount: Decimal,
    ) -> None:
        """Make amount the only value for the month of value_date."""


__all__ = ["AssetRepositoryPort"]
