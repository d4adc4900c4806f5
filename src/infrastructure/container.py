"""Composition root for wiring infrastructure adapters."""

from src.application.ports.asset_repository import AssetRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.owner_repository import OwnerRepositoryPort
from src.infrastructure.asset_repository import SqlAlchemyAssetRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.owner_repository import SqlAlchemyOwnerRepository
from src.infrastructure.settings import LedgerSettings


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return a new database adapter; the caller owns its lifecycle."""
    return SqlAlchemyDatabaseEngineAdapter(db_url)


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_ledger_repository(
    db_port: DatabaseEnginePort,
) -> LedgerRepositoryPort:
    """Return the accounts and transactions repository."""
    return SqlAlchemyLedgerRepository(db_port)


def build_asset_repository(
    db_port: DatabaseEnginePort,
) -> AssetRepositoryPort:
    """Return the assets and asset values repository."""
    return SqlAlchemyAssetRepository(db_port)


def build_owner_repository(
    db_port: DatabaseEnginePort,
) -> OwnerRepositoryPort:
    """Return the owners repository."""
    return SqlAlchemyOwnerRepository(db_port)


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_ledger_repository",
    "build_asset_repository",
    "build_owner_repository",
]
