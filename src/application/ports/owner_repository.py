"""Port for resolving the ledger owner."""

from typing import Protocol


class OwnerRepositoryPort(Protocol):
    """Port exposing owner lookups."""

    def fetch_owner_id(self, email: str) -> str:
        """Return the owner id for an email; raise RuntimeError if missing."""

    def ensure_owner(self, email: str) -> str:
        """Return the owner id for an email, creating the owner if needed."""


__all__ = ["OwnerRepositoryPort"]
