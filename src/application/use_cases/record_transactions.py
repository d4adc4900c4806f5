"""Use case to record a batch of double-entry transactions."""

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import NewTransaction, OperationResult, TransactionDraft
from src.domain.services.ledger import build_transaction
from src.infrastructure.logging.logger import get_app_logger


class RecordTransactionsUseCase:
    """Validate and persist transactions as one all-or-nothing batch.

    Each draft becomes a transaction with a positive entry on the destination
    account and a negative entry of the same magnitude on the source account.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing account and transaction storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: str,
        drafts: list[TransactionDraft],
    ) -> OperationResult:
        """Record the drafts for the owner.

        Args:
            owner_id: Owner stamped on every transaction.
            drafts: User input, one draft per transaction.

        Returns:
            OperationResult: Success with the number of transactions saved,
            or the first validation / storage error. Nothing is written on
            failure.
        """
        if not drafts:
            return OperationResult.fail("No transactions to save.")

        try:
            accounts = {
                account.id: account
                for account in self._ledger_repository.fetch_accounts(owner_id)
            }
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to load accounts: {exc}")
            return OperationResult.fail(
                "Transactions could not be saved. Please try again."
            )

        transactions: list[NewTransaction] = []
        for position, draft in enumerate(drafts, start=1):
            try:
                transactions.append(build_transaction(draft, accounts))
            except ValueError as exc:
                self._logger.warning(
                    f"Rejected transaction batch at row {position}: {exc}"
                )
                return OperationResult.fail(f"Row {position}: {exc}")

        try:
            created = self._ledger_repository.create_transactions(
                owner_id,
                transactions,
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to save transaction batch: {exc}")
            return OperationResult.fail(
                "Transactions could not be saved. Please try again."
            )

        self._logger.info(
            f"Recorded {len(created)} transactions for owner={owner_id}"
        )
        return OperationResult.ok(
            f"Saved {len(created)} transaction(s).",
            affected=len(created),
        )


__all__ = ["RecordTransactionsUseCase"]
