"""SQLAlchemy-backed repository for ledger accounts and transactions."""

from datetime import date
from uuid import uuid4

from sqlalchemy import Date, Numeric, bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import (
    Account,
    AccountUsage,
    EntryRecord,
    NewTransaction,
    TransactionRecord,
)
from src.utils.decimal_utils import coerce_decimal


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, account_type, owner_id
    FROM accounts
    WHERE owner_id = :owner_id
    ORDER BY name
    """
)

SELECT_ACCOUNT_USAGES_SQL = text(
    """
    SELECT a.id AS id,
           a.name AS name,
           a.account_type AS account_type,
           a.owner_id AS owner_id,
           COUNT(e.id) AS usage_count
    FROM accounts a
    LEFT JOIN entries e ON e.account_id = a.id
    WHERE a.owner_id = :owner_id
    GROUP BY a.id, a.name, a.account_type, a.owner_id
    ORDER BY a.name
    """
)

SELECT_ACCOUNT_USAGE_SQL = text(
    """
    SELECT a.id AS id,
           a.name AS name,
           a.account_type AS account_type,
           a.owner_id AS owner_id,
           COUNT(e.id) AS usage_count
    FROM accounts a
    LEFT JOIN entries e ON e.account_id = a.id
    WHERE a.owner_id = :owner_id AND a.id = :account_id
    GROUP BY a.id, a.name, a.account_type, a.owner_id
    """
)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (id, owner_id, name, account_type)
    VALUES (:id, :owner_id, :name, :account_type)
    """
)

UPDATE_ACCOUNT_NAME_SQL = text(
    """
    UPDATE accounts
    SET name = :name
    WHERE id = :account_id AND owner_id = :owner_id
    """
)

DELETE_ACCOUNT_SQL = text(
    """
    DELETE FROM accounts
    WHERE id = :account_id AND owner_id = :owner_id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id,
        owner_id,
        tx_date,
        description,
        transaction_type
    )
    VALUES (
        :id,
        :owner_id,
        :tx_date,
        :description,
        :transaction_type
    )
    """
).bindparams(bindparam("tx_date", type_=Date))

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO entries (id, transaction_id, account_id, amount)
    VALUES (:id, :transaction_id, :account_id, :amount)
    """
).bindparams(bindparam("amount", type_=Numeric(18, 2)))

SELECT_TRANSACTIONS_SQL = (
    text(
        """
        SELECT t.id AS transaction_id,
               t.tx_date AS tx_date,
               t.description AS description,
               t.transaction_type AS transaction_type,
               e.account_id AS account_id,
               a.name AS account_name,
               e.amount AS amount
        FROM transactions t
        JOIN entries e ON e.transaction_id = t.id
        JOIN accounts a ON a.id = e.account_id
        WHERE t.owner_id = :owner_id
          AND t.tx_date >= :start_date
          AND t.tx_date < :end_date
        ORDER BY t.tx_date, t.id, e.amount DESC
        """
    )
    .bindparams(
        bindparam("start_date", type_=Date),
        bindparam("end_date", type_=Date),
    )
    .columns(tx_date=Date)
)

SELECT_RECENT_TRANSACTIONS_SQL = text(
    """
    WITH recent AS (
        SELECT id
        FROM transactions
        WHERE owner_id = :owner_id
        ORDER BY tx_date DESC, id DESC
        LIMIT :limit
    )
    SELECT t.id AS transaction_id,
           t.tx_date AS tx_date,
           t.description AS description,
           t.transaction_type AS transaction_type,
           e.account_id AS account_id,
           a.name AS account_name,
           e.amount AS amount
    FROM transactions t
    JOIN recent r ON r.id = t.id
    JOIN entries e ON e.transaction_id = t.id
    JOIN accounts a ON a.id = e.account_id
    ORDER BY t.tx_date DESC, t.id DESC, e.amount DESC
    """
).columns(tx_date=Date)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for accounts and transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_accounts(self, owner_id: str) -> list[Account]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ACCOUNTS_SQL,
                {"owner_id": owner_id},
            ).all()
        return [self._to_account(row) for row in rows]

    def fetch_account_usages(self, owner_id: str) -> list[AccountUsage]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ACCOUNT_USAGES_SQL,
                {"owner_id": owner_id},
            ).all()
        return [
            AccountUsage(
                account=self._to_account(row),
                usage_count=int(row.usage_count),
            )
            for row in rows
        ]

    def fetch_account_usage(
        self,
        owner_id: str,
        account_id: str,
    ) -> AccountUsage | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_USAGE_SQL,
                {"owner_id": owner_id, "account_id": account_id},
            ).first()
        if row is None:
            return None
        return AccountUsage(
            account=self._to_account(row),
            usage_count=int(row.usage_count),
        )

    def create_account(
        self,
        owner_id: str,
        name: str,
        account_type: str,
    ) -> Account:
        account = Account(
            id=str(uuid4()),
            name=name,
            account_type=account_type,
            owner_id=owner_id,
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_ACCOUNT_SQL,
                {
                    "id": account.id,
                    "owner_id": owner_id,
                    "name": name,
                    "account_type": account_type,
                },
            )
        return account

    def rename_account(
        self,
        owner_id: str,
        account_id: str,
        name: str,
    ) -> int:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_ACCOUNT_NAME_SQL,
                {"owner_id": owner_id, "account_id": account_id, "name": name},
            )
            updated = result.rowcount
        return updated

    def delete_account(self, owner_id: str, account_id: str) -> int:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_ACCOUNT_SQL,
                {"owner_id": owner_id, "account_id": account_id},
            )
            deleted = result.rowcount
        return deleted

    def create_transactions(
        self,
        owner_id: str,
        transactions: list[NewTransaction],
    ) -> list[str]:
        """Insert transactions and their entries in a single DB transaction.

        Args:
            owner_id: Owner stamped on every transaction.
            transactions: Validated transactions with balanced entries.

        Returns:
            list[str]: Ids of the inserted transactions, in input order.
        """
        transaction_rows = []
        entry_rows = []
        for tx in transactions:
            tx_id = str(uuid4())
            transaction_rows.append(
                {
                    "id": tx_id,
                    "owner_id": owner_id,
                    "tx_date": tx.tx_date,
                    "description": tx.description,
                    "transaction_type": tx.transaction_type,
                }
            )
            entry_rows.extend(
                {
                    "id": str(uuid4()),
                    "transaction_id": tx_id,
                    "account_id": entry.account_id,
                    "amount": entry.amount,
                }
                for entry in tx.entries
            )
        if not transaction_rows:
            return []

        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_TRANSACTION_SQL, transaction_rows)
            conn.execute(INSERT_ENTRY_SQL, entry_rows)
        return [row["id"] for row in transaction_rows]

    def fetch_transactions(
        self,
        owner_id: str,
        start_date: date,
        end_date: date,
    ) -> list[TransactionRecord]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {
                    "owner_id": owner_id,
                    "start_date": start_date,
                    "end_date": end_date,
                },
            ).all()
        return self._to_transactions(rows)

    def fetch_recent_transactions(
        self,
        owner_id: str,
        limit: int,
    ) -> list[TransactionRecord]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_RECENT_TRANSACTIONS_SQL,
                {"owner_id": owner_id, "limit": limit},
            ).all()
        return self._to_transactions(rows)

    @staticmethod
    def _to_account(row) -> Account:
        return Account(
            id=row.id,
            name=row.name,
            account_type=row.account_type,
            owner_id=row.owner_id,
        )

    @staticmethod
    def _to_transactions(rows) -> list[TransactionRecord]:
        """Fold joined transaction/entry rows into records, keeping order."""
        records: dict[str, TransactionRecord] = {}
        for row in rows:
            record = records.get(row.transaction_id)
            if record is None:
                record = TransactionRecord(
                    id=row.transaction_id,
                    tx_date=row.tx_date,
                    description=row.description,
                    transaction_type=row.transaction_type,
                )
                records[row.transaction_id] = record
            record.entries.append(
                EntryRecord(
                    account_id=row.account_id,
                    account_name=row.account_name,
                    amount=coerce_decimal(row.amount),
                )
            )
        return list(records.values())


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SELECT_ACCOUNTS_SQL",
    "INSERT_TRANSACTION_SQL",
    "INSERT_ENTRY_SQL",
]
