"""Tests for the asset valuation use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from src.application.use_cases.get_annual_net_worth import (
    GetAnnualNetWorthUseCase,
)
from src.application.use_cases.get_asset_snapshot import (
    GetMonthlyAssetSnapshotUseCase,
)
from src.application.use_cases.upsert_asset_value import (
    UpsertAssetValueUseCase,
)
from src.domain.models import Asset, AssetValue, MonthKey


OWNER = "owner-1"
CASH = Asset("cash", "Wallet", "CASH", OWNER)
LOAN = Asset("loan", "Mortgage", "LOAN", OWNER)


def test_upsert_stores_value_under_month_marker() -> None:
    repository = MagicMock()
    repository.fetch_asset.return_value = CASH
    use_case = UpsertAssetValueUseCase(repository, logger=MagicMock())

    result = use_case.execute(OWNER, "cash", 2024, 5, "1,000")

    assert result.success is True
    repository.fetch_asset.assert_called_once_with(OWNER, "cash")
    repository.upsert_asset_value.assert_called_once_with(
        "cash",
        date(2024, 5, 1),
        Decimal("1000.00"),
    )


def test_upsert_accepts_negative_values_with_warning() -> None:
    repository = MagicMock()
    repository.fetch_asset.return_value = LOAN
    logger = MagicMock()
    use_case = UpsertAssetValueUseCase(repository, logger=logger)

    result = use_case.execute(OWNER, "loan", 2024, 5, "-10")

    assert result.success is True
    repository.upsert_asset_value.assert_called_once()
    logger.warning.assert_called_once()


def test_upsert_rejects_invalid_month_and_amount() -> None:
    repository = MagicMock()
    use_case = UpsertAssetValueUseCase(repository, logger=MagicMock())

    bad_month = use_case.execute(OWNER, "cash", 2024, 13, "1")
    bad_amount = use_case.execute(OWNER, "cash", 2024, 5, "lots")

    assert bad_month.success is False
    assert "Invalid month" in bad_month.message
    assert bad_amount.success is False
    assert "not a valid number" in bad_amount.message
    repository.upsert_asset_value.assert_not_called()


def test_upsert_rejects_unknown_asset() -> None:
    repository = MagicMock()
    repository.fetch_asset.return_value = None
    use_case = UpsertAssetValueUseCase(repository, logger=MagicMock())

    result = use_case.execute(OWNER, "other", 2024, 5, "1")

    assert result.success is False
    assert "Unknown asset" in result.message
    repository.upsert_asset_value.assert_not_called()


def test_upsert_reports_storage_failure() -> None:
    repository = MagicMock()
    repository.fetch_asset.return_value = CASH
    repository.upsert_asset_value.side_effect = OperationalError(
        "INSERT",
        {},
        Exception("locked"),
    )
    logger = MagicMock()
    use_case = UpsertAssetValueUseCase(repository, logger=logger)

    result = use_case.execute(OWNER, "cash", 2024, 5, "1")

    assert result.success is False
    logger.error.assert_called_once()


def test_snapshot_fetches_previous_and_target_month() -> None:
    repository = MagicMock()
    repository.fetch_assets.return_value = [CASH, LOAN]
    repository.fetch_asset_values.return_value = [
        AssetValue("cash", date(2024, 5, 1), Decimal("1000")),
        AssetValue("cash", date(2024, 4, 1), Decimal("800")),
        AssetValue("loan", date(2024, 5, 1), Decimal("200")),
        AssetValue("loan", date(2024, 4, 1), Decimal("200")),
    ]
    use_case = GetMonthlyAssetSnapshotUseCase(repository, logger=MagicMock())

    snapshot = use_case.execute(OWNER, MonthKey(2024, 5))

    repository.fetch_asset_values.assert_called_once_with(
        OWNER,
        date(2024, 4, 1),
        date(2024, 6, 1),
    )
    assert snapshot.total_assets == Decimal("1000")
    assert snapshot.total_liabilities == Decimal("200")
    assert snapshot.net_worth == Decimal("800")


def test_annual_series_for_current_year_stops_at_current_month() -> None:
    repository = MagicMock()
    repository.fetch_assets.return_value = [CASH]
    repository.fetch_asset_values.return_value = [
        AssetValue("cash", date(2023, 12, 1), Decimal("100")),
        AssetValue("cash", date(2024, 1, 1), Decimal("150")),
    ]
    use_case = GetAnnualNetWorthUseCase(repository, logger=MagicMock())

    series = use_case.execute(OWNER, 2024, today=MonthKey(2024, 4))

    repository.fetch_asset_values.assert_called_once_with(
        OWNER,
        date(2023, 12, 1),
        date(2024, 5, 1),
    )
    assert len(series.points) == 4
    assert series.points[0].net_worth_change == Decimal("50")


def test_annual_series_for_past_year_covers_twelve_months() -> None:
    repository = MagicMock()
    repository.fetch_assets.return_value = []
    repository.fetch_asset_values.return_value = []
    use_case = GetAnnualNetWorthUseCase(repository, logger=MagicMock())

    series = use_case.execute(OWNER, 2022, today=MonthKey(2024, 4))

    assert len(series.points) == 12
    repository.fetch_asset_values.assert_called_once_with(
        OWNER,
        date(2021, 12, 1),
        date(2023, 1, 1),
    )


def test_annual_series_for_future_year_is_empty() -> None:
    repository = MagicMock()
    repository.fetch_assets.return_value = []
    repository.fetch_asset_values.return_value = []
    use_case = GetAnnualNetWorthUseCase(repository, logger=MagicMock())

    series = use_case.execute(OWNER, 2030, today=MonthKey(2024, 4))

    assert series.points == []
