"""Port for reading and writing ledger accounts and transactions."""

from datetime import date
from typing import Protocol

from src.domain.models import (
    Account,
    AccountUsage,
    NewTransaction,
    TransactionRecord,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing owner-scoped access to accounts and transactions."""

    def fetch_accounts(self, owner_id: str) -> list[Account]:
        """Return the owner's accounts ordered by name."""

    def fetch_account_usages(self, owner_id: str) -> list[AccountUsage]:
        """Return the owner's accounts with their entry counts."""

    def fetch_account_usage(
        self,
        owner_id: str,
        account_id: str,
    ) -> AccountUsage | None:
        """Return one account with its entry count, or None."""

    def create_account(
        self,
        owner_id: str,
        name: str,
        account_type: str,
    ) -> Account:
        """Insert an account and return it."""

    def rename_account(
        self,
        owner_id: str,
        account_id: str,
        name: str,
    ) -> int:
        """Rename an account and return the number of rows updated."""

    def delete_account(self, owner_id: str, account_id: str) -> int:
        """Delete an account and return the number of rows deleted."""

    def create_transactions(
        self,
        owner_id: str,
        transactions: list[NewTransaction],
    ) -> list[str]:
        """Insert transactions with their entries in one atomic batch."""

    def fetch_transactions(
        self,
        owner_id: str,
        start_date: date,
        end_date: date,
    ) -> list[TransactionRecord]:
        """Return transactions dated in [start_date, end_date)."""

    def fetch_recent_transactions(
        self,
        owner_id: str,
        limit: int,
    ) -> list[TransactionRecord]:
        """Return the most recent transactions, newest first."""


__all__ = ["LedgerRepositoryPort"]
