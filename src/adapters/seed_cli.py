"""CLI adapter to create the schema, the owner and the default accounts.

This module wires the SeedDefaultsUseCase to the concrete database adapter
and provides a command-line entry point for preparing a fresh database.
"""

from src.application.use_cases.seed_defaults import SeedDefaultsUseCase
from src.infrastructure.container import (
    build_database_adapter,
    build_ledger_repository,
    build_owner_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema


def main() -> None:
    """Run the seed use case for the configured owner."""
    logger = get_app_logger()
    settings = build_settings()
    with build_database_adapter() as adapter:
        use_case = SeedDefaultsUseCase(
            owner_repository=build_owner_repository(adapter),
            ledger_repository=build_ledger_repository(adapter),
            ensure_schema=lambda: ensure_schema(adapter, logger=logger),
            logger=logger,
        )
        result = use_case.execute(settings.owner_email)

    print(f"Owner {settings.owner_email} ready (id {result.owner_id}).")
    if result.created_accounts:
        print(
            f"Created {len(result.created_accounts)} default accounts: "
            f"{', '.join(result.created_accounts)}"
        )
    else:
        print("Default accounts already present.")


if __name__ == "__main__":  # pragma: no cover
    main()
