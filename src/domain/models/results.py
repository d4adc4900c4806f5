"""Result objects returned to user-facing adapters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a write operation, carried as data.

    Attributes:
        success: Whether the operation was applied.
        message: Message suitable for display to the user.
        affected: Number of records created, updated or deleted.
    """

    success: bool
    message: str
    affected: int = 0

    @classmethod
    def ok(cls, message: str, affected: int = 1) -> "OperationResult":
        return cls(success=True, message=message, affected=affected)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message, affected=0)


__all__ = ["OperationResult"]
