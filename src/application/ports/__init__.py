"""Application ports package."""

from .asset_repository import AssetRepositoryPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .owner_repository import OwnerRepositoryPort

__all__ = [
    "AssetRepositoryPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "OwnerRepositoryPort",
]
