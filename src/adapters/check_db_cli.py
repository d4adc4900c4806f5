"""Simple CLI to validate the database connection.

This adapter is meant for local operations: it builds the concrete database
adapter from the infrastructure layer and runs a basic health check.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the configured database."""
    logger = get_app_logger()
    with build_database_adapter() as adapter:
        engine = adapter.get_engine()
        logger.info(f"Ledger DB: {engine.url}")
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    logger.info("Connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
