"""Tests for the net_worth_report_cli adapter."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.adapters import net_worth_report_cli
from src.domain.models import (
    AnnualNetWorthSeries,
    MonthKey,
    NetWorthPoint,
    NetWorthSummary,
)


def _summary(assets: str, liabilities: str) -> NetWorthSummary:
    return NetWorthSummary(
        asset_total=Decimal(assets),
        liability_total=Decimal(liabilities),
        net_worth=Decimal(assets) - Decimal(liabilities),
    )


class _Adapter:
    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_main_prints_series_for_report_year(monkeypatch, capsys):
    """REPORT_YEAR should select the year passed to the use case."""
    calls = {}
    series = AnnualNetWorthSeries(
        year=2023,
        points=[
            NetWorthPoint(
                month=MonthKey(2023, 1),
                summary=_summary("1200", "200"),
                net_worth_change=Decimal("100"),
            )
        ],
        baseline=_summary("900", "0"),
        year_change=Decimal("100"),
        year_change_percent=Decimal("11.11"),
        average_assets=Decimal("1200"),
        average_liabilities=Decimal("200"),
        average_net_worth=Decimal("1000"),
    )

    class _FakeUseCase:
        def __init__(self, asset_repository, logger=None, timezone=None):
            calls["timezone"] = timezone

        def execute(self, owner_id, year, today=None):
            calls["owner_id"] = owner_id
            calls["year"] = year
            return series

    class _Owners:
        def fetch_owner_id(self, email):
            return f"id:{email}"

    monkeypatch.setenv("REPORT_YEAR", "2023")
    monkeypatch.setattr(
        net_worth_report_cli,
        "build_settings",
        lambda: SimpleNamespace(
            owner_email="me@example.com",
            timezone="Asia/Seoul",
            currency_code="KRW",
        ),
    )
    monkeypatch.setattr(
        net_worth_report_cli,
        "build_database_adapter",
        _Adapter,
    )
    monkeypatch.setattr(
        net_worth_report_cli,
        "build_owner_repository",
        lambda adapter: _Owners(),
    )
    monkeypatch.setattr(
        net_worth_report_cli,
        "build_asset_repository",
        lambda adapter: "assets",
    )
    monkeypatch.setattr(
        net_worth_report_cli,
        "GetAnnualNetWorthUseCase",
        _FakeUseCase,
    )

    net_worth_report_cli.main()

    output = capsys.readouterr().out
    assert calls == {
        "timezone": "Asia/Seoul",
        "owner_id": "id:me@example.com",
        "year": 2023,
    }
    assert "Net worth 2023 (KRW)" in output
    assert "2023-01" in output
    assert "(+100.00)" in output
    assert "Year change: 100.00 (11.11%)" in output


def test_resolve_year_defaults_and_validates() -> None:
    assert net_worth_report_cli._resolve_year(None, 2024) == 2024
    assert net_worth_report_cli._resolve_year("2021", 2024) == 2021
    with pytest.raises(SystemExit):
        net_worth_report_cli._resolve_year("last year", 2024)
