"""Domain services for double-entry transactions and ledger aggregates."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from zoneinfo import ZoneInfo

from src.domain.constants import DEFAULT_TIMEZONE, TRANSACTION_TYPES
from src.domain.models import (
    Account,
    LedgerMonthGroup,
    MonthKey,
    MonthlyLedgerStats,
    NewEntry,
    NewTransaction,
    TransactionDraft,
    TransactionRecord,
)
from src.domain.policies import (
    allowed_destination_types,
    allowed_source_types,
    is_valid_posting,
)
from src.domain.services.months import month_key_for
from src.domain.services.normalization import normalize_code, normalize_name
from src.domain.services.validation import require_choice
from src.utils.decimal_utils import parse_amount


def build_entries(
    amount: Decimal,
    destination_account_id: str,
    source_account_id: str,
) -> tuple[NewEntry, NewEntry]:
    """Return the balanced (debit, credit) entry pair for a magnitude."""
    return (
        NewEntry(account_id=destination_account_id, amount=amount),
        NewEntry(account_id=source_account_id, amount=-amount),
    )


def build_transaction(
    draft: TransactionDraft,
    accounts: Mapping[str, Account],
) -> NewTransaction:
    """Validate a draft and turn it into a balanced transaction.

    Args:
        draft: User input for one transaction.
        accounts: Owner's accounts keyed by id.

    Returns:
        NewTransaction: Transaction with its debit and credit entries.

    Raises:
        ValueError: With a user-facing message when the draft is invalid.
    """
    if draft.tx_date is None:
        raise ValueError("Date is required.")
    description = normalize_name(draft.description)
    if description is None:
        raise ValueError("Description is required.")
    amount = parse_amount(draft.amount)
    if amount is None:
        raise ValueError(f"Amount is not a valid number: {draft.amount!r}.")
    if amount <= 0:
        raise ValueError("Amount must be greater than zero.")
    transaction_type = require_choice(
        normalize_code(draft.transaction_type),
        TRANSACTION_TYPES,
        "transaction type",
    )

    destination = accounts.get(draft.destination_account_id)
    if destination is None:
        raise ValueError(
            f"Unknown destination account: {draft.destination_account_id}."
        )
    source = accounts.get(draft.source_account_id)
    if source is None:
        raise ValueError(f"Unknown source account: {draft.source_account_id}.")
    if destination.id == source.id:
        raise ValueError("Source and destination accounts must differ.")
    if not is_valid_posting(
        transaction_type,
        destination.account_type,
        source.account_type,
    ):
        raise ValueError(
            f"{transaction_type} transactions post to "
            f"{'/'.join(allowed_destination_types(transaction_type))} "
            f"from {'/'.join(allowed_source_types(transaction_type))} "
            f"accounts; got {destination.account_type} "
            f"from {source.account_type}."
        )

    return NewTransaction(
        tx_date=draft.tx_date,
        description=description,
        transaction_type=transaction_type,
        entries=build_entries(amount, destination.id, source.id),
    )


def compute_monthly_ledger_stats(
    transactions: Iterable[TransactionRecord],
    window: list[MonthKey],
    tz: ZoneInfo | str = DEFAULT_TIMEZONE,
) -> list[MonthlyLedgerStats]:
    """Aggregate transactions into income/expense totals per month.

    Every month of the window gets a bucket, including months without
    transactions. Transactions outside the window are ignored.

    Args:
        transactions: Stored transactions with their entries.
        window: Chronological months to report on.
        tz: Reference timezone for date-to-month mapping.

    Returns:
        list[MonthlyLedgerStats]: One bucket per window month, in order.
    """
    income: dict[MonthKey, Decimal] = {month: Decimal("0") for month in window}
    expense: dict[MonthKey, Decimal] = {month: Decimal("0") for month in window}

    for tx in transactions:
        month = month_key_for(tx.tx_date, tz)
        if month not in income:
            continue
        if tx.transaction_type == "INCOME":
            income[month] += tx.amount
        elif tx.transaction_type == "EXPENSE":
            expense[month] += tx.amount

    return [
        MonthlyLedgerStats(
            month=month,
            income=income[month],
            expense=expense[month],
        )
        for month in window
    ]


def group_transactions_by_month(
    transactions: Iterable[TransactionRecord],
    tz: ZoneInfo | str = DEFAULT_TIMEZONE,
) -> list[LedgerMonthGroup]:
    """Group transactions by month, newest month first.

    Transactions keep their incoming order inside a group; each group total
    is the sum of debit magnitudes.
    """
    grouped: dict[MonthKey, list[TransactionRecord]] = {}
    for tx in transactions:
        grouped.setdefault(month_key_for(tx.tx_date, tz), []).append(tx)

    return [
        LedgerMonthGroup(
            month=month,
            transactions=items,
            total=sum((tx.amount for tx in items), Decimal("0")),
        )
        for month, items in sorted(
            grouped.items(),
            key=lambda item: item[0],
            reverse=True,
        )
    ]


__all__ = [
    "build_entries",
    "build_transaction",
    "compute_monthly_ledger_stats",
    "group_transactions_by_month",
]
