"""Domain models package."""

from .assets import Asset, AssetValue
from .finance import (
    AnnualNetWorthSeries,
    AssetPosition,
    CategorySnapshot,
    MonthlyAssetSnapshot,
    NetWorthPoint,
    NetWorthSummary,
)
from .ledger import (
    Account,
    AccountUsage,
    EntryRecord,
    LedgerMonthGroup,
    MonthlyLedgerStats,
    NewEntry,
    NewTransaction,
    TransactionDraft,
    TransactionRecord,
)
from .months import MonthKey
from .results import OperationResult

__all__ = [
    "Account",
    "AccountUsage",
    "AnnualNetWorthSeries",
    "Asset",
    "AssetPosition",
    "AssetValue",
    "CategorySnapshot",
    "EntryRecord",
    "LedgerMonthGroup",
    "MonthKey",
    "MonthlyAssetSnapshot",
    "MonthlyLedgerStats",
    "NetWorthPoint",
    "NetWorthSummary",
    "NewEntry",
    "NewTransaction",
    "OperationResult",
    "TransactionDraft",
    "TransactionRecord",
]
