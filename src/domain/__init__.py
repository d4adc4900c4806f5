"""Domain package for business rules and core models."""

from .constants import (
    ACCOUNT_TYPES,
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
    TRANSACTION_TYPES,
)
from .models import (
    Account,
    AnnualNetWorthSeries,
    Asset,
    AssetValue,
    MonthKey,
    MonthlyAssetSnapshot,
    MonthlyLedgerStats,
    NetWorthSummary,
    OperationResult,
    TransactionDraft,
)
from .policies import is_deletable, is_valid_posting
from .services import (
    build_transaction,
    compute_annual_net_worth_series,
    compute_monthly_asset_snapshot,
    compute_monthly_ledger_stats,
    rolling_month_window,
)

__all__ = [
    "ACCOUNT_TYPES",
    "ASSET_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "TRANSACTION_TYPES",
    "Account",
    "AnnualNetWorthSeries",
    "Asset",
    "AssetValue",
    "MonthKey",
    "MonthlyAssetSnapshot",
    "MonthlyLedgerStats",
    "NetWorthSummary",
    "OperationResult",
    "TransactionDraft",
    "build_transaction",
    "compute_annual_net_worth_series",
    "compute_monthly_asset_snapshot",
    "compute_monthly_ledger_stats",
    "is_deletable",
    "is_valid_posting",
    "rolling_month_window",
]
