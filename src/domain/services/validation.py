"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import LIABILITY_CATEGORIES


def validate_value_sign(
    category: str,
    amount: Decimal,
    logger: Logger,
    liability_categories: Iterable[str] = LIABILITY_CATEGORIES,
) -> None:
    """Warn when a stored value breaks the sign convention.

    Liabilities are stored as positive magnitudes; a negative value on either
    side is kept but logged.

    Args:
        category: Asset category of the value.
        amount: Stored amount.
        logger: Logger used for warnings.
        liability_categories: Categories treated as liabilities.
    """
    if amount >= 0:
        return
    if category in liability_categories:
        logger.warning(
            f"Liability value is negative for category={category}: {amount}"
        )
    else:
        logger.warning(
            f"Asset value is negative for category={category}: {amount}"
        )


def require_choice(value: str | None, choices: Iterable[str], label: str) -> str:
    """Return value when it is one of choices, else raise ValueError."""
    allowed = tuple(choices)
    if value not in allowed:
        raise ValueError(
            f"Invalid {label}: {value!r}. Expected one of {', '.join(allowed)}."
        )
    return value


__all__ = ["validate_value_sign", "require_choice"]
