"""SQLAlchemy-backed repository for tracked assets and monthly values."""

from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import Date, Numeric, bindparam, text

from src.application.ports.asset_repository import AssetRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import Asset, AssetValue, MonthKey
from src.utils.decimal_utils import coerce_decimal


SELECT_ASSETS_SQL = text(
    """
    SELECT id, name, category, owner_id
    FROM assets
    WHERE owner_id = :owner_id
    ORDER BY name
    """
)

SELECT_ASSET_SQL = text(
    """
    SELECT id, name, category, owner_id
    FROM assets
    WHERE owner_id = :owner_id AND id = :asset_id
    """
)

INSERT_ASSET_SQL = text(
    """
    INSERT INTO assets (id, owner_id, name, category)
    VALUES (:id, :owner_id, :name, :category)
    """
)

UPDATE_ASSET_NAME_SQL = text(
    """
    UPDATE assets
    SET name = :name
    WHERE id = :asset_id AND owner_id = :owner_id
    """
)

DELETE_ASSET_VALUES_SQL = text(
    """
    DELETE FROM asset_values
    WHERE asset_id IN (
        SELECT id FROM assets WHERE id = :asset_id AND owner_id = :owner_id
    )
    """
)

DELETE_ASSET_SQL = text(
    """
    DELETE FROM assets
    WHERE id = :asset_id AND owner_id = :owner_id
    """
)

SELECT_ASSET_VALUES_SQL = (
    text(
        """
        SELECT v.asset_id AS asset_id,
               v.value_date AS value_date,
               v.amount AS amount
        FROM asset_values v
        JOIN assets a ON a.id = v.asset_id
        WHERE a.owner_id = :owner_id
          AND v.value_date >= :start_date
          AND v.value_date < :end_date
        ORDER BY v.value_date, v.asset_id
        """
    )
    .bindparams(
        bindparam("start_date", type_=Date),
        bindparam("end_date", type_=Date),
    )
)

DELETE_OTHER_MONTH_VALUES_SQL = text(
    """
    DELETE FROM asset_values
    WHERE asset_id = :asset_id
      AND value_date >= :month_start
      AND value_date < :next_month_start
      AND value_date <> :value_date
    """
).bindparams(
    bindparam("month_start", type_=Date),
    bindparam("next_month_start", type_=Date),
    bindparam("value_date", type_=Date),
)

UPSERT_ASSET_VALUE_SQL = text(
    """
    INSERT INTO asset_values (id, asset_id, value_date, amount)
    VALUES (:id, :asset_id, :value_date, :amount)
    ON CONFLICT (asset_id, value_date)
    DO UPDATE SET amount = excluded.amount
    """
).bindparams(
    bindparam("value_date", type_=Date),
    bindparam("amount", type_=Numeric(18, 2)),
)


class SqlAlchemyAssetRepository(AssetRepositoryPort):
    """Repository backed by SQLAlchemy for assets and their values."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_assets(self, owner_id: str) -> list[Asset]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ASSETS_SQL,
                {"owner_id": owner_id},
            ).all()
        return [self._to_asset(row) for row in rows]

    def fetch_asset(self, owner_id: str, asset_id: str) -> Asset | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ASSET_SQL,
                {"owner_id": owner_id, "asset_id": asset_id},
            ).first()
        return self._to_asset(row) if row is not None else None

    def create_asset(self, owner_id: str, name: str, category: str) -> Asset:
        asset = Asset(
            id=str(uuid4()),
            name=name,
            category=category,
            owner_id=owner_id,
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_ASSET_SQL,
                {
                    "id": asset.id,
                    "owner_id": owner_id,
                    "name": name,
                    "category": category,
                },
            )
        return asset

    def rename_asset(self, owner_id: str, asset_id: str, name: str) -> int:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_ASSET_NAME_SQL,
                {"owner_id": owner_id, "asset_id": asset_id, "name": name},
            )
            updated = result.rowcount
        return updated

    def delete_asset(self, owner_id: str, asset_id: str) -> int:
        """Delete an asset and every value recorded for it.

        Both deletes run in one database transaction.

        Returns:
            int: Number of asset rows deleted (0 or 1).
        """
        params = {"owner_id": owner_id, "asset_id": asset_id}
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_ASSET_VALUES_SQL, params)
            result = conn.execute(DELETE_ASSET_SQL, params)
            deleted = result.rowcount
        return deleted

    def fetch_asset_values(
        self,
        owner_id: str,
        start_date: date,
        end_date: date,
    ) -> list[AssetValue]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ASSET_VALUES_SQL,
                {
                    "owner_id": owner_id,
                    "start_date": start_date,
                    "end_date": end_date,
                },
            ).all()
        return [
            AssetValue(
                asset_id=row.asset_id,
                value_date=self._to_date(row.value_date),
                amount=coerce_decimal(row.amount),
            )
            for row in rows
        ]

    def upsert_asset_value(
        self,
        asset_id: str,
        value_date: date,
        amount: Decimal,
    ) -> None:
        """Store amount as the single value for the month of value_date.

        Other rows of the same asset dated within that month are removed in
        the same database transaction, so a month never holds two values.
        """
        month = MonthKey.from_date(value_date)
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                DELETE_OTHER_MONTH_VALUES_SQL,
                {
                    "asset_id": asset_id,
                    "month_start": month.start_date,
                    "next_month_start": month.next().start_date,
                    "value_date": value_date,
                },
            )
            conn.execute(
                UPSERT_ASSET_VALUE_SQL,
                {
                    "id": str(uuid4()),
                    "asset_id": asset_id,
                    "value_date": value_date,
                    "amount": amount,
                },
            )

    @staticmethod
    def _to_date(value) -> date:
        """Reduce a stored value date to a calendar date.

        SQLite hands DATE columns back as text, sometimes with a time part.
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])

    @staticmethod
    def _to_asset(row) -> Asset:
        return Asset(
            id=row.id,
            name=row.name,
            category=row.category,
            owner_id=row.owner_id,
        )


__all__ = [
    "SqlAlchemyAssetRepository",
    "UPSERT_ASSET_VALUE_SQL",
]
