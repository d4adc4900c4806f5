"""Rules deciding which accounts a transaction may post to."""

from src.domain.constants import BALANCE_SHEET_ACCOUNT_TYPES

# transaction type -> (allowed destination types, allowed source types)
_POSTING_RULES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "EXPENSE": (("EXPENSE",), BALANCE_SHEET_ACCOUNT_TYPES),
    "INCOME": (BALANCE_SHEET_ACCOUNT_TYPES, ("REVENUE",)),
}


def allowed_destination_types(transaction_type: str) -> tuple[str, ...]:
    """Return account types that may receive the debit entry."""
    return _POSTING_RULES.get(transaction_type, ((), ()))[0]


def allowed_source_types(transaction_type: str) -> tuple[str, ...]:
    """Return account types that may give the credit entry."""
    return _POSTING_RULES.get(transaction_type, ((), ()))[1]


def is_valid_posting(
    transaction_type: str,
    destination_type: str,
    source_type: str,
) -> bool:
    """Return True when the account pair matches the transaction type.

    Args:
        transaction_type: INCOME or EXPENSE.
        destination_type: Type of the debit (positive) account.
        source_type: Type of the credit (negative) account.

    Returns:
        bool: True when both sides are allowed.
    """
    return (
        destination_type in allowed_destination_types(transaction_type)
        and source_type in allowed_source_types(transaction_type)
    )


def is_deletable(usage_count: int) -> bool:
    """Return True when no entry references the account."""
    return usage_count == 0


__all__ = [
    "allowed_destination_types",
    "allowed_source_types",
    "is_valid_posting",
    "is_deletable",
]
