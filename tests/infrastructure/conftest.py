"""Fixtures for repository tests backed by a temporary SQLite file."""

import pytest

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.owner_repository import SqlAlchemyOwnerRepository
from src.infrastructure.schema import ensure_schema


@pytest.fixture
def sqlite_db(tmp_path):
    """Yield a database adapter with the ledger schema created."""
    adapter = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'ledger.db'}"
    )
    ensure_schema(adapter, logger=_SilentLogger())
    yield adapter
    adapter.close()


@pytest.fixture
def owner_id(sqlite_db):
    return SqlAlchemyOwnerRepository(sqlite_db).ensure_owner("me@example.com")


class _SilentLogger:
    def info(self, msg: str) -> None:
        pass
