"""Domain policies package."""

from .account_rules import (
    allowed_destination_types,
    allowed_source_types,
    is_deletable,
    is_valid_posting,
)

__all__ = [
    "allowed_destination_types",
    "allowed_source_types",
    "is_deletable",
    "is_valid_posting",
]
