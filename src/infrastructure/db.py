"""Database infrastructure for the household ledger.

This module creates the SQLAlchemy engine backing the ledger and asset
tables. It belongs to the infrastructure layer because it deals with an
external system (PostgreSQL in production, SQLite for local runs).
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    The local .env file is loaded first so developer settings apply.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation owning one SQLAlchemy engine.

    The engine is created on first use and released by ``close``; build one
    adapter per process and pass it down to repositories.
    """

    def __init__(self, db_url: str | None = None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Optional database URL; DATABASE_URL is read when omitted.
        """
        self._db_url = db_url
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: Lazily initialized engine.
        """
        if self._engine is None:
            db_url = self._db_url or _get_env_var("DATABASE_URL")
            self._engine = _create_engine(db_url)
        return self._engine

    def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "SqlAlchemyDatabaseEngineAdapter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
