"""Tests for asset snapshot and net worth services."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import Asset, AssetValue, MonthKey
from src.domain.services.finance import (
    compute_annual_net_worth_series,
    compute_monthly_asset_snapshot,
    index_values,
    percent_change,
)


OWNER = "owner-1"
CASH = Asset("cash", "Wallet", "CASH", OWNER)
LOAN = Asset("loan", "Mortgage", "LOAN", OWNER)
STOCK = Asset("stock", "Brokerage", "STOCK", OWNER)


def _value(asset: Asset, year: int, month: int, amount: str) -> AssetValue:
    return AssetValue(asset.id, date(year, month, 1), Decimal(amount))


def test_percent_change_is_zero_without_baseline() -> None:
    assert percent_change(Decimal("500"), Decimal("0")) == Decimal("0")
    assert percent_change(Decimal("-3"), Decimal("0")) == Decimal("0")
    assert percent_change(Decimal("200"), Decimal("800")) == Decimal("25")


def test_index_values_keeps_latest_duplicate_and_warns() -> None:
    logger = MagicMock()
    values = [
        _value(CASH, 2024, 1, "10"),
        AssetValue(CASH.id, date(2024, 1, 15), Decimal("20")),
    ]

    index = index_values(values, logger)

    assert index == {(CASH.id, MonthKey(2024, 1)): Decimal("20")}
    logger.warning.assert_called_once()


def test_snapshot_totals_and_category_changes() -> None:
    logger = MagicMock()
    values = [
        _value(CASH, 2024, 5, "1000"),
        _value(CASH, 2024, 4, "800"),
        _value(LOAN, 2024, 5, "200"),
        _value(LOAN, 2024, 4, "200"),
    ]

    snapshot = compute_monthly_asset_snapshot(
        [CASH, LOAN],
        values,
        MonthKey(2024, 5),
        logger=logger,
    )

    assert snapshot.total_assets == Decimal("1000")
    assert snapshot.total_liabilities == Decimal("200")
    assert snapshot.net_worth == Decimal("800")
    assert snapshot.net_worth_change == Decimal("200")
    cash = snapshot.category("CASH")
    assert cash.change == Decimal("200")
    assert cash.change_percent == Decimal("25")
    loan = snapshot.category("LOAN")
    assert loan.change == Decimal("0")
    assert loan.change_percent == Decimal("0")
    logger.warning.assert_not_called()


def test_snapshot_lists_every_category_in_order() -> None:
    snapshot = compute_monthly_asset_snapshot(
        [CASH],
        [],
        MonthKey(2024, 5),
        logger=MagicMock(),
    )

    assert [item.category for item in snapshot.categories] == [
        "CASH",
        "STOCK",
        "PENSION",
        "REAL_ESTATE",
        "LOAN",
        "ESO",
        "RENTAL",
    ]


def test_snapshot_without_values_is_flat_zero() -> None:
    snapshot = compute_monthly_asset_snapshot(
        [CASH, LOAN, STOCK],
        [],
        MonthKey(2024, 5),
        logger=MagicMock(),
    )

    assert snapshot.net_worth == Decimal("0")
    assert snapshot.total_assets == Decimal("0")
    assert snapshot.total_liabilities == Decimal("0")
    assert all(item.change_percent == 0 for item in snapshot.categories)


def test_snapshot_ignores_values_of_other_months() -> None:
    snapshot = compute_monthly_asset_snapshot(
        [CASH],
        [_value(CASH, 2024, 2, "999")],
        MonthKey(2024, 5),
        logger=MagicMock(),
    )

    assert snapshot.net_worth == Decimal("0")


def test_snapshot_warns_on_negative_values() -> None:
    logger = MagicMock()

    snapshot = compute_monthly_asset_snapshot(
        [LOAN],
        [_value(LOAN, 2024, 5, "-50")],
        MonthKey(2024, 5),
        logger=logger,
    )

    assert snapshot.total_liabilities == Decimal("-50")
    logger.warning.assert_called_once()
    assert "Liability value is negative" in logger.warning.call_args[0][0]


def test_annual_series_january_compares_with_prior_december() -> None:
    values = [
        _value(CASH, 2023, 12, "1000"),
        _value(CASH, 2024, 1, "1300"),
        _value(CASH, 2024, 2, "1200"),
        _value(LOAN, 2024, 2, "100"),
    ]

    series = compute_annual_net_worth_series(
        [CASH, LOAN],
        values,
        2024,
        3,
        logger=MagicMock(),
    )

    assert [point.month for point in series.points] == [
        MonthKey(2024, 1),
        MonthKey(2024, 2),
        MonthKey(2024, 3),
    ]
    january, february, march = series.points
    assert january.net_worth_change == Decimal("300")
    assert february.summary.net_worth == Decimal("1100")
    assert february.net_worth_change == Decimal("-200")
    assert march.summary.net_worth == Decimal("0")
    assert march.net_worth_change == Decimal("-1100")
    assert series.baseline.net_worth == Decimal("1000")
    assert series.year_change == Decimal("-1000")
    assert series.year_change_percent == Decimal("-100")
    assert series.average_assets == Decimal("2500") / Decimal("3")
    assert series.average_liabilities == Decimal("100") / Decimal("3")
    assert series.latest is march


def test_annual_series_for_future_year_has_no_points() -> None:
    series = compute_annual_net_worth_series(
        [CASH],
        [_value(CASH, 2025, 12, "10")],
        2026,
        0,
        logger=MagicMock(),
    )

    assert series.points == []
    assert series.latest is None
    assert series.year_change == Decimal("0")
    assert series.year_change_percent == Decimal("0")
    assert series.average_net_worth == Decimal("0")
