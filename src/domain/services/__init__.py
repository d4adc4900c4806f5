"""Domain services package."""

from .finance import (
    compute_annual_net_worth_series,
    compute_monthly_asset_snapshot,
    compute_net_worth_summary,
    index_values,
    percent_change,
)
from .ledger import (
    build_entries,
    build_transaction,
    compute_monthly_ledger_stats,
    group_transactions_by_month,
)
from .months import (
    current_month,
    month_key_for,
    rolling_month_window,
    window_bounds,
)
from .normalization import normalize_code, normalize_name
from .validation import require_choice, validate_value_sign

__all__ = [
    "build_entries",
    "build_transaction",
    "compute_annual_net_worth_series",
    "compute_monthly_asset_snapshot",
    "compute_monthly_ledger_stats",
    "compute_net_worth_summary",
    "current_month",
    "group_transactions_by_month",
    "index_values",
    "month_key_for",
    "normalize_code",
    "normalize_name",
    "percent_change",
    "require_choice",
    "rolling_month_window",
    "validate_value_sign",
    "window_bounds",
]
