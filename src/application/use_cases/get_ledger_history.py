"""Use case to list recent transactions grouped by month."""

from zoneinfo import ZoneInfo

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_TIMEZONE
from src.domain.models import LedgerMonthGroup
from src.domain.services.ledger import group_transactions_by_month


class GetLedgerHistoryUseCase:
    """Return the latest transactions, newest month first."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        timezone: ZoneInfo | str = DEFAULT_TIMEZONE,
        limit: int = 100,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._timezone = timezone
        self._limit = limit

    def execute(self, owner_id: str) -> list[LedgerMonthGroup]:
        transactions = self._ledger_repository.fetch_recent_transactions(
            owner_id,
            self._limit,
        )
        return group_transactions_by_month(transactions, self._timezone)


__all__ = ["GetLedgerHistoryUseCase"]
