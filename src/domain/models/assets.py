"""Domain models for tracked assets and their monthly values."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import LIABILITY_CATEGORIES
from src.domain.models.months import MonthKey


@dataclass(frozen=True)
class Asset:
    """Item whose monetary value is tracked month by month."""

    id: str
    name: str
    category: str
    owner_id: str

    @property
    def is_liability(self) -> bool:
        return self.category in LIABILITY_CATEGORIES


@dataclass(frozen=True)
class AssetValue:
    """Value of an asset as of a month marker."""

    asset_id: str
    value_date: date
    amount: Decimal

    @property
    def month(self) -> MonthKey:
        return MonthKey.from_date(self.value_date)


__all__ = ["Asset", "AssetValue"]
