"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_QUANTUM = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(value) -> Decimal | None:
    """Parse user input into a finite currency amount.

    Thousands separators are ignored and the result is quantized to two
    decimal places.

    Args:
        value: Raw amount from a form or CLI (str, int, float or Decimal).

    Returns:
        Decimal | None: Parsed amount, or None when the input is empty,
        malformed, NaN or infinite.
    """
    if value is None:
        return None
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            return None
        value = cleaned
    try:
        amount = coerce_decimal(value)
        if not amount.is_finite():
            return None
        return amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        return None


__all__ = ["CURRENCY_QUANTUM", "coerce_decimal", "parse_amount"]
