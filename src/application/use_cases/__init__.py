"""Application use cases package."""

from .get_annual_net_worth import GetAnnualNetWorthUseCase
from .get_asset_snapshot import GetMonthlyAssetSnapshotUseCase
from .get_ledger_history import GetLedgerHistoryUseCase
from .get_ledger_stats import GetMonthlyLedgerStatsUseCase
from .manage_accounts import GroupedAccounts, ManageAccountsUseCase
from .manage_assets import ManageAssetsUseCase
from .record_transactions import RecordTransactionsUseCase
from .seed_defaults import SeedDefaultsUseCase, SeedResult
from .upsert_asset_value import UpsertAssetValueUseCase

__all__ = [
    "GetAnnualNetWorthUseCase",
    "GetLedgerHistoryUseCase",
    "GetMonthlyAssetSnapshotUseCase",
    "GetMonthlyLedgerStatsUseCase",
    "GroupedAccounts",
    "ManageAccountsUseCase",
    "ManageAssetsUseCase",
    "RecordTransactionsUseCase",
    "SeedDefaultsUseCase",
    "SeedResult",
    "UpsertAssetValueUseCase",
]
