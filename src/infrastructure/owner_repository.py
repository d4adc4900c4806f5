"""SQLAlchemy-backed repository for ledger owners."""

from uuid import uuid4

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.owner_repository import OwnerRepositoryPort


SELECT_OWNER_SQL = text(
    """
    SELECT id
    FROM users
    WHERE email = :email
    LIMIT 1
    """
)

INSERT_OWNER_SQL = text(
    """
    INSERT INTO users (id, email)
    VALUES (:id, :email)
    ON CONFLICT (email) DO NOTHING
    """
)


class SqlAlchemyOwnerRepository(OwnerRepositoryPort):
    """Repository backed by SQLAlchemy for the users table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_owner_id(self, email: str) -> str:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            result = conn.execute(SELECT_OWNER_SQL, {"email": email}).first()
        if not result:
            raise RuntimeError(f"Missing owner in users: {email}")
        return result.id

    def ensure_owner(self, email: str) -> str:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_OWNER_SQL, {"id": str(uuid4()), "email": email})
            result = conn.execute(SELECT_OWNER_SQL, {"email": email}).first()
        return result.id


__all__ = ["SqlAlchemyOwnerRepository"]
