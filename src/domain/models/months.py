"""Calendar month value object."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, order=True)
class MonthKey:
    """A calendar month identified by (year, month).

    Snapshots and ledger buckets are keyed by this value; comparisons never
    rely on raw timestamps.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12: {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "MonthKey":
        return cls(value.year, value.month)

    @property
    def start_date(self) -> date:
        """Return the month marker (first day of the month)."""
        return date(self.year, self.month, 1)

    def shift(self, months: int) -> "MonthKey":
        """Return the month ``months`` away (negative values go back)."""
        index = self.year * 12 + (self.month - 1) + months
        return MonthKey(index // 12, index % 12 + 1)

    def previous(self) -> "MonthKey":
        return self.shift(-1)

    def next(self) -> "MonthKey":
        return self.shift(1)

    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


__all__ = ["MonthKey"]
