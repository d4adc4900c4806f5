"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.assets import Asset
from src.domain.models.months import MonthKey


@dataclass(frozen=True)
class AssetPosition:
    """Value of a single asset for a month and the month before."""

    asset: Asset
    current_value: Decimal
    previous_value: Decimal
    change: Decimal
    change_percent: Decimal


@dataclass(frozen=True)
class CategorySnapshot:
    """Totals for one asset category.

    Attributes:
        category: Asset category code.
        total: Sum of the category's values for the month.
        previous_total: Same sum for the prior month.
        change: total minus previous_total.
        change_percent: Change relative to previous_total (0 when it is 0).
        positions: Per-asset values in the category.
    """

    category: str
    total: Decimal
    previous_total: Decimal
    change: Decimal
    change_percent: Decimal
    positions: list[AssetPosition]


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset (non-liability) values.
        liability_total: Sum of liability values.
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class MonthlyAssetSnapshot:
    """Category breakdown and net worth for one month."""

    month: MonthKey
    categories: list[CategorySnapshot]
    current: NetWorthSummary
    previous: NetWorthSummary

    @property
    def total_assets(self) -> Decimal:
        return self.current.asset_total

    @property
    def total_liabilities(self) -> Decimal:
        return self.current.liability_total

    @property
    def net_worth(self) -> Decimal:
        return self.current.net_worth

    @property
    def net_worth_change(self) -> Decimal:
        return self.current.net_worth - self.previous.net_worth

    def category(self, code: str) -> CategorySnapshot | None:
        return next(
            (item for item in self.categories if item.category == code),
            None,
        )


@dataclass(frozen=True)
class NetWorthPoint:
    """One month of an annual net worth series."""

    month: MonthKey
    summary: NetWorthSummary
    net_worth_change: Decimal


@dataclass(frozen=True)
class AnnualNetWorthSeries:
    """Monthly net worth for a year with year-over-year figures."""

    year: int
    points: list[NetWorthPoint]
    baseline: NetWorthSummary
    year_change: Decimal
    year_change_percent: Decimal
    average_assets: Decimal
    average_liabilities: Decimal
    average_net_worth: Decimal

    @property
    def latest(self) -> NetWorthPoint | None:
        return self.points[-1] if self.points else None


__all__ = [
    "AssetPosition",
    "CategorySnapshot",
    "NetWorthSummary",
    "MonthlyAssetSnapshot",
    "NetWorthPoint",
    "AnnualNetWorthSeries",
]
