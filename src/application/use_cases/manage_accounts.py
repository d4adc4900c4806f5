"""Use case to list, create, rename and delete ledger accounts."""

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import ACCOUNT_TYPES, BALANCE_SHEET_ACCOUNT_TYPES
from src.domain.models import AccountUsage, OperationResult
from src.domain.policies import is_deletable
from src.domain.services.normalization import normalize_code, normalize_name
from src.domain.services.validation import require_choice
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class GroupedAccounts:
    """Accounts split the way the settings page lists them.

    Attributes:
        balance_sheet: ASSET and LIABILITY accounts.
        expense: EXPENSE accounts.
        revenue: REVENUE accounts.
    """

    balance_sheet: list[AccountUsage]
    expense: list[AccountUsage]
    revenue: list[AccountUsage]


class ManageAccountsUseCase:
    """Account administration for one owner."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing account storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def list_accounts(self, owner_id: str) -> list[AccountUsage]:
        """Return accounts with usage counts, ordered by name."""
        return self._ledger_repository.fetch_account_usages(owner_id)

    def list_grouped(self, owner_id: str) -> GroupedAccounts:
        usages = self.list_accounts(owner_id)
        return GroupedAccounts(
            balance_sheet=[
                item
                for item in usages
                if item.account.account_type in BALANCE_SHEET_ACCOUNT_TYPES
            ],
            expense=[
                item
                for item in usages
                if item.account.account_type == "EXPENSE"
            ],
            revenue=[
                item
                for item in usages
                if item.account.account_type == "REVENUE"
            ],
        )

    def create(
        self,
        owner_id: str,
        name: str,
        account_type: str,
    ) -> OperationResult:
        """Create an account.

        Args:
            owner_id: Owner of the new account.
            name: Display name, unique per owner.
            account_type: One of ASSET, LIABILITY, EXPENSE, REVENUE.

        Returns:
            OperationResult: Outcome with a user-facing message.
        """
        clean_name = normalize_name(name)
        if clean_name is None:
            return OperationResult.fail("Account name is required.")
        try:
            clean_type = require_choice(
                normalize_code(account_type),
                ACCOUNT_TYPES,
                "account type",
            )
        except ValueError as exc:
            return OperationResult.fail(str(exc))

        try:
            account = self._ledger_repository.create_account(
                owner_id,
                clean_name,
                clean_type,
            )
        except IntegrityError:
            self._logger.warning(f"Duplicate account name: {clean_name}")
            return OperationResult.fail(
                f"An account named '{clean_name}' already exists."
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to create account {clean_name}: {exc}")
            return OperationResult.fail(
                "The account could not be created. Please try again."
            )
        self._logger.info(
            f"Created account {account.id} ({clean_type}) '{clean_name}'"
        )
        return OperationResult.ok(f"Created account '{clean_name}'.")

    def rename(
        self,
        owner_id: str,
        account_id: str,
        name: str,
    ) -> OperationResult:
        clean_name = normalize_name(name)
        if clean_name is None:
            return OperationResult.fail("Account name is required.")
        try:
            updated = self._ledger_repository.rename_account(
                owner_id,
                account_id,
                clean_name,
            )
        except IntegrityError:
            self._logger.warning(f"Duplicate account name: {clean_name}")
            return OperationResult.fail(
                f"An account named '{clean_name}' already exists."
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to rename account {account_id}: {exc}")
            return OperationResult.fail(
                "The account could not be renamed. Please try again."
            )
        if not updated:
            return OperationResult.fail(f"Unknown account: {account_id}.")
        return OperationResult.ok(f"Renamed account to '{clean_name}'.")

    def delete(self, owner_id: str, account_id: str) -> OperationResult:
        """Delete an account that no entry references.

        Args:
            owner_id: Owner of the account.
            account_id: Account to delete.

        Returns:
            OperationResult: Rejection naming the usage count when the
            account is still referenced.
        """
        try:
            usage = self._ledger_repository.fetch_account_usage(
                owner_id,
                account_id,
            )
            if usage is None:
                return OperationResult.fail(f"Unknown account: {account_id}.")
            if not is_deletable(usage.usage_count):
                return OperationResult.fail(
                    f"Account '{usage.account.name}' is used by "
                    f"{usage.usage_count} entries and cannot be deleted."
                )
            deleted = self._ledger_repository.delete_account(
                owner_id,
                account_id,
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to delete account {account_id}: {exc}")
            return OperationResult.fail(
                "The account could not be deleted. Please try again."
            )
        self._logger.info(f"Deleted account {account_id}")
        return OperationResult.ok(
            f"Deleted account '{usage.account.name}'.",
            affected=deleted,
        )


__all__ = ["GroupedAccounts", "ManageAccountsUseCase"]
