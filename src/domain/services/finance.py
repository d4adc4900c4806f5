"""Domain services for asset valuation aggregates."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import ASSET_CATEGORIES, LIABILITY_CATEGORIES
from src.domain.models import (
    AnnualNetWorthSeries,
    Asset,
    AssetPosition,
    AssetValue,
    CategorySnapshot,
    MonthKey,
    MonthlyAssetSnapshot,
    NetWorthPoint,
    NetWorthSummary,
)
from src.domain.services.validation import validate_value_sign
from src.utils.decimal_utils import coerce_decimal

ValueIndex = dict[tuple[str, MonthKey], Decimal]


def percent_change(change: Decimal, baseline: Decimal) -> Decimal:
    """Return change relative to baseline in percent, 0 when baseline is 0."""
    if baseline == 0:
        return Decimal("0")
    return change / baseline * Decimal("100")


def index_values(
    values: Iterable[AssetValue],
    logger: Logger | None = None,
) -> ValueIndex:
    """Key asset values by (asset id, calendar month).

    Dates are reduced to their (year, month) so a stray time or day
    component never hides a value. When two rows land on the same key the
    last one wins.
    """
    index: ValueIndex = {}
    for value in values:
        key = (value.asset_id, value.month)
        if key in index and logger is not None:
            logger.warning(
                f"Duplicate value for asset={value.asset_id} "
                f"month={value.month.label()}; keeping the latest row"
            )
        index[key] = coerce_decimal(value.amount)
    return index


def compute_net_worth_summary(
    assets: Iterable[Asset],
    index: ValueIndex,
    month: MonthKey,
    *,
    liability_categories: Iterable[str] = LIABILITY_CATEGORIES,
) -> NetWorthSummary:
    """Compute asset, liability and net worth totals for a month.

    Args:
        assets: Tracked assets.
        index: Values keyed by (asset id, month).
        month: Month to total.
        liability_categories: Categories counted as liabilities.

    Returns:
        NetWorthSummary: Totals; missing values count as zero.
    """
    liabilities = tuple(liability_categories)
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    for asset in assets:
        amount = index.get((asset.id, month), Decimal("0"))
        if asset.category in liabilities:
            liability_total += amount
        else:
            asset_total += amount
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
    )


def compute_monthly_asset_snapshot(
    assets: list[Asset],
    values: Iterable[AssetValue],
    month: MonthKey,
    *,
    logger: Logger,
    categories: Iterable[str] = ASSET_CATEGORIES,
) -> MonthlyAssetSnapshot:
    """Compute per-category totals and net worth for a month.

    Args:
        assets: Tracked assets.
        values: Stored values covering at least the month and the one before.
        month: Target month.
        logger: Logger used for warnings.
        categories: Category order of the breakdown.

    Returns:
        MonthlyAssetSnapshot: Category breakdown with month-over-month change.
    """
    index = index_values(values, logger)
    previous_month = month.previous()

    positions: dict[str, list[AssetPosition]] = {code: [] for code in categories}
    for asset in assets:
        current = index.get((asset.id, month), Decimal("0"))
        previous = index.get((asset.id, previous_month), Decimal("0"))
        validate_value_sign(asset.category, current, logger)
        change = current - previous
        positions.setdefault(asset.category, []).append(
            AssetPosition(
                asset=asset,
                current_value=current,
                previous_value=previous,
                change=change,
                change_percent=percent_change(change, previous),
            )
        )

    category_snapshots = []
    for category, items in positions.items():
        total = sum((item.current_value for item in items), Decimal("0"))
        previous_total = sum(
            (item.previous_value for item in items),
            Decimal("0"),
        )
        change = total - previous_total
        category_snapshots.append(
            CategorySnapshot(
                category=category,
                total=total,
                previous_total=previous_total,
                change=change,
                change_percent=percent_change(change, previous_total),
                positions=items,
            )
        )

    return MonthlyAssetSnapshot(
        month=month,
        categories=category_snapshots,
        current=compute_net_worth_summary(assets, index, month),
        previous=compute_net_worth_summary(assets, index, previous_month),
    )


def compute_annual_net_worth_series(
    assets: list[Asset],
    values: Iterable[AssetValue],
    year: int,
    last_month: int,
    *,
    logger: Logger,
) -> AnnualNetWorthSeries:
    """Compute monthly net worth for January..last_month of a year.

    January's change is measured against December of the prior year, and the
    year-over-year figures compare the last produced month to that December.

    Args:
        assets: Tracked assets.
        values: Stored values from December of the prior year onwards.
        year: Target year.
        last_month: Last month to produce (0 produces no points).
        logger: Logger used for warnings.

    Returns:
        AnnualNetWorthSeries: Points in chronological order plus summaries.
    """
    index = index_values(values, logger)
    baseline = compute_net_worth_summary(assets, index, MonthKey(year - 1, 12))

    points: list[NetWorthPoint] = []
    previous = baseline
    for month_number in range(1, last_month + 1):
        month = MonthKey(year, month_number)
        summary = compute_net_worth_summary(assets, index, month)
        points.append(
            NetWorthPoint(
                month=month,
                summary=summary,
                net_worth_change=summary.net_worth - previous.net_worth,
            )
        )
        previous = summary

    latest_net_worth = (
        points[-1].summary.net_worth if points else baseline.net_worth
    )
    year_change = latest_net_worth - baseline.net_worth
    count = Decimal(len(points)) if points else Decimal("1")

    return AnnualNetWorthSeries(
        year=year,
        points=points,
        baseline=baseline,
        year_change=year_change,
        year_change_percent=percent_change(year_change, baseline.net_worth),
        average_assets=sum(
            (point.summary.asset_total for point in points),
            Decimal("0"),
        ) / count,
        average_liabilities=sum(
            (point.summary.liability_total for point in points),
            Decimal("0"),
        ) / count,
        average_net_worth=sum(
            (point.summary.net_worth for point in points),
            Decimal("0"),
        ) / count,
    )


__all__ = [
    "percent_change",
    "index_values",
    "compute_net_worth_summary",
    "compute_monthly_asset_snapshot",
    "compute_annual_net_worth_series",
]
