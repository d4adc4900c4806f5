"""Domain normalization helpers."""


def normalize_name(name: str | None) -> str | None:
    """Normalize user-entered names.

    Args:
        name: Raw account, asset or description text.

    Returns:
        str | None: Stripped value, or None when blank.
    """
    if not name:
        return None
    cleaned = name.strip()
    return cleaned if cleaned else None


def normalize_code(code: str | None) -> str | None:
    """Normalize enumerated codes (account types, categories).

    Args:
        code: Raw code value from a form or repository.

    Returns:
        str | None: Upper-cased code value.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


__all__ = ["normalize_name", "normalize_code"]
