"""Table definitions for the ledger database.

The DDL sticks to types and constraints understood by both PostgreSQL and
SQLite so the same statements serve production and local runs.
"""

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger


CREATE_USERS_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE
)
"""

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    owner_id TEXT NOT NULL REFERENCES users (id),
    name TEXT NOT NULL,
    account_type TEXT NOT NULL,
    UNIQUE (owner_id, name)
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    owner_id TEXT NOT NULL REFERENCES users (id),
    tx_date DATE NOT NULL,
    description TEXT NOT NULL,
    transaction_type TEXT NOT NULL
)
"""

CREATE_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS entries (
    id TEXT PRIMARY KEY,
    transaction_id TEXT NOT NULL REFERENCES transactions (id),
    account_id TEXT NOT NULL REFERENCES accounts (id),
    amount NUMERIC(18, 2) NOT NULL
)
"""

CREATE_ASSETS_SQL = """
CREATE TABLE IF NOT EXISTS assets (
    id TEXT PRIMARY KEY,
    owner_id TEXT NOT NULL REFERENCES users (id),
    name TEXT NOT NULL,
    category TEXT NOT NULL
)
"""

CREATE_ASSET_VALUES_SQL = """
CREATE TABLE IF NOT EXISTS asset_values (
    id TEXT PRIMARY KEY,
    asset_id TEXT NOT NULL REFERENCES assets (id) ON DELETE CASCADE,
    value_date DATE NOT NULL,
    amount NUMERIC(18, 2) NOT NULL,
    UNIQUE (asset_id, value_date)
)
"""

CREATE_INDEXES_SQL = (
    "CREATE INDEX IF NOT EXISTS ix_transactions_owner_date "
    "ON transactions (owner_id, tx_date)",
    "CREATE INDEX IF NOT EXISTS ix_entries_transaction "
    "ON entries (transaction_id)",
    "CREATE INDEX IF NOT EXISTS ix_entries_account ON entries (account_id)",
)

SCHEMA_STATEMENTS = (
    CREATE_USERS_SQL,
    CREATE_ACCOUNTS_SQL,
    CREATE_TRANSACTIONS_SQL,
    CREATE_ENTRIES_SQL,
    CREATE_ASSETS_SQL,
    CREATE_ASSET_VALUES_SQL,
    *CREATE_INDEXES_SQL,
)


def ensure_schema(db_port: DatabaseEnginePort, logger=None) -> None:
    """Create the ledger tables when they do not exist yet.

    Args:
        db_port: Port providing access to the ledger engine.
        logger: Optional logger compatible with logging.Logger-like API.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)
    resolved_logger.info(
        f"Ensured ledger schema ({len(SCHEMA_STATEMENTS)} statements)"
    )


__all__ = [
    "CREATE_USERS_SQL",
    "CREATE_ACCOUNTS_SQL",
    "CREATE_TRANSACTIONS_SQL",
    "CREATE_ENTRIES_SQL",
    "CREATE_ASSETS_SQL",
    "CREATE_ASSET_VALUES_SQL",
    "SCHEMA_STATEMENTS",
    "ensure_schema",
]
