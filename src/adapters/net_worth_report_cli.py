"""CLI adapter printing the month-by-month net worth of a year.

The year is read from REPORT_YEAR and defaults to the current year in the
configured reference timezone.
"""

import os
from decimal import Decimal

from src.application.use_cases.get_annual_net_worth import (
    GetAnnualNetWorthUseCase,
)
from src.domain.models import AnnualNetWorthSeries
from src.domain.services.months import current_month
from src.infrastructure.container import (
    build_asset_repository,
    build_database_adapter,
    build_owner_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _resolve_year(raw_year: str | None, default: int) -> int:
    if not raw_year:
        return default
    try:
        return int(raw_year)
    except ValueError as exc:
        raise SystemExit(f"REPORT_YEAR must be an integer: {raw_year}") from exc


def _fmt(value: Decimal) -> str:
    return f"{value:,.2f}"


def _print_series(series: AnnualNetWorthSeries, currency_code: str) -> None:
    print(f"Net worth {series.year} ({currency_code})")
    print(f"  Baseline (Dec {series.year - 1}): "
          f"{_fmt(series.baseline.net_worth)}")
    if not series.points:
        print("  No months to report.")
        return
    for point in series.points:
        sign = "+" if point.net_worth_change >= 0 else ""
        print(
            f"  {point.month.label()}  "
            f"assets {_fmt(point.summary.asset_total)}  "
            f"liabilities {_fmt(point.summary.liability_total)}  "
            f"net {_fmt(point.summary.net_worth)} "
            f"({sign}{_fmt(point.net_worth_change)})"
        )
    print(
        f"  Year change: {_fmt(series.year_change)} "
        f"({series.year_change_percent:.2f}%)"
    )
    print(f"  Average net worth: {_fmt(series.average_net_worth)}")


def main() -> None:
    """Compute and print the annual net worth series."""
    logger = get_app_logger()
    settings = build_settings()
    today = current_month(settings.timezone)
    year = _resolve_year(os.getenv("REPORT_YEAR"), today.year)

    with build_database_adapter() as adapter:
        owner_id = build_owner_repository(adapter).fetch_owner_id(
            settings.owner_email
        )
        use_case = GetAnnualNetWorthUseCase(
            asset_repository=build_asset_repository(adapter),
            logger=logger,
            timezone=settings.timezone,
        )
        series = use_case.execute(owner_id, year, today=today)

    _print_series(series, settings.currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
