"""Use case to prepare a fresh database for an owner."""

from collections.abc import Callable
from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.owner_repository import OwnerRepositoryPort
from src.domain.constants import DEFAULT_ACCOUNTS
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeedResult:
    """Outcome of a seed run.

    Attributes:
        owner_id: Id of the (possibly new) owner.
        created_accounts: Names of the default accounts that were added.
    """

    owner_id: str
    created_accounts: list[str]


class SeedDefaultsUseCase:
    """Create the schema, the owner and any missing default accounts."""

    def __init__(
        self,
        owner_repository: OwnerRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        ensure_schema: Callable[[], None] | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            owner_repository: Port resolving and creating owners.
            ledger_repository: Port providing account storage.
            ensure_schema: Optional callable creating the tables.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._owner_repository = owner_repository
        self._ledger_repository = ledger_repository
        self._ensure_schema = ensure_schema
        self._logger = logger or get_app_logger()

    def execute(self, owner_email: str) -> SeedResult:
        """Seed the database for owner_email; safe to run repeatedly.

        Args:
            owner_email: Email identifying the owner.

        Returns:
            SeedResult: Owner id and the account names created on this run.
        """
        if self._ensure_schema is not None:
            self._ensure_schema()
        owner_id = self._owner_repository.ensure_owner(owner_email)
        existing = {
            account.name
            for account in self._ledger_repository.fetch_accounts(owner_id)
        }
        created = []
        for name, account_type in DEFAULT_ACCOUNTS:
            if name in existing:
                continue
            self._ledger_repository.create_account(owner_id, name, account_type)
            created.append(name)
        self._logger.info(
            f"Seeded owner {owner_email}: {len(created)} accounts created"
        )
        return SeedResult(owner_id=owner_id, created_accounts=created)


__all__ = ["SeedDefaultsUseCase", "SeedResult"]
