"""Domain models for the double-entry ledger."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.months import MonthKey


@dataclass(frozen=True)
class Account:
    """Named bucket entries are posted to."""

    id: str
    name: str
    account_type: str
    owner_id: str


@dataclass(frozen=True)
class AccountUsage:
    """Account together with the number of entries referencing it."""

    account: Account
    usage_count: int

    @property
    def can_delete(self) -> bool:
        return self.usage_count == 0


@dataclass(frozen=True)
class TransactionDraft:
    """Unvalidated user input for a single transaction.

    Attributes:
        tx_date: Date the event happened.
        description: Free-text description.
        amount: Unsigned magnitude as entered (str, int or Decimal).
        transaction_type: INCOME or EXPENSE.
        source_account_id: Account the value leaves (credit side).
        destination_account_id: Account the value reaches (debit side).
    """

    tx_date: date
    description: str
    amount: object
    transaction_type: str
    source_account_id: str
    destination_account_id: str


@dataclass(frozen=True)
class NewEntry:
    """Entry to be written alongside a new transaction."""

    account_id: str
    amount: Decimal


@dataclass(frozen=True)
class NewTransaction:
    """Validated transaction ready to be persisted with its two entries."""

    tx_date: date
    description: str
    transaction_type: str
    entries: tuple[NewEntry, NewEntry]


@dataclass(frozen=True)
class EntryRecord:
    """Stored entry as read back for reporting."""

    account_id: str
    account_name: str
    amount: Decimal


@dataclass(frozen=True)
class TransactionRecord:
    """Stored transaction with its entries."""

    id: str
    tx_date: date
    description: str
    transaction_type: str
    entries: list[EntryRecord] = field(default_factory=list)

    @property
    def amount(self) -> Decimal:
        """Return the debit magnitude (the positive entry's amount)."""
        for entry in self.entries:
            if entry.amount > 0:
                return entry.amount
        return Decimal("0")

    @property
    def debit_entry(self) -> EntryRecord | None:
        return next((e for e in self.entries if e.amount > 0), None)

    @property
    def credit_entry(self) -> EntryRecord | None:
        return next((e for e in self.entries if e.amount < 0), None)


@dataclass(frozen=True)
class MonthlyLedgerStats:
    """Income, expense and net totals for one month bucket."""

    month: MonthKey
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class LedgerMonthGroup:
    """Recent transactions that fall into one month."""

    month: MonthKey
    transactions: list[TransactionRecord]
    total: Decimal


__all__ = [
    "Account",
    "AccountUsage",
    "TransactionDraft",
    "NewEntry",
    "NewTransaction",
    "EntryRecord",
    "TransactionRecord",
    "MonthlyLedgerStats",
    "LedgerMonthGroup",
]
