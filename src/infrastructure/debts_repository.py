"""SQLAlchemy-backed repository for user debts."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.exceptions import DebtRepositoryError
from src.domain.models import DebtDraft, DebtRecord
from src.utils.decimal_utils import coerce_decimal, coerce_optional_int


CREATE_DEBTS_SQL = """
CREATE TABLE IF NOT EXISTS debts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    type TEXT NOT NULL,
    amount NUMERIC NOT NULL,
    interest_rate NUMERIC NOT NULL,
    minimum_payment NUMERIC NOT NULL,
    remaining_term INTEGER,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""

SELECT_DEBTS_SQL = text(
    """
    SELECT id, name, type, amount, interest_rate, minimum_payment,
           remaining_term
    FROM debts
    WHERE user_id = :user_id
    ORDER BY created_at DESC
    """
)

SELECT_DEBT_SQL = text(
    """
    SELECT id, name, type, amount, interest_rate, minimum_payment,
           remaining_term
    FROM debts
    WHERE id = :id
    """
)

INSERT_DEBT_SQL = text(
    """
    INSERT INTO debts (
        id,
        user_id,
        name,
        type,
        amount,
        interest_rate,
        minimum_payment,
        remaining_term,
        created_at,
        updated_at
    )
    VALUES (
        :id,
        :user_id,
        :name,
        :type,
        :amount,
        :interest_rate,
        :minimum_payment,
        :remaining_term,
        :created_at,
        :updated_at
    )
    """
)

UPDATE_DEBT_SQL = text(
    """
    UPDATE debts
    SET name = :name,
        type = :type,
        amount = :amount,
        interest_rate = :interest_rate,
        minimum_payment = :minimum_payment,
        remaining_term = :remaining_term,
        updated_at = :updated_at
    WHERE id = :id
    """
)

DELETE_DEBT_SQL = text("DELETE FROM debts WHERE id = :id")


class SqlAlchemyDebtsRepository(DebtsRepositoryPort):
    """Repository backed by SQLAlchemy for the ``debts`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the debts engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Ensure the debts table exists."""
        try:
            engine = self._db_port.get_debts_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_DEBTS_SQL)
        except SQLAlchemyError as exc:
            raise DebtRepositoryError(
                f"Failed to prepare debts table: {exc}"
            ) from exc

    def fetch_debts(self, user_id: str) -> list[DebtRecord]:
        """Return the user's debts, most recently created first."""
        try:
            engine = self._db_port.get_debts_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_DEBTS_SQL,
                    {"user_id": user_id},
                ).all()
        except SQLAlchemyError as exc:
            raise DebtRepositoryError(
                f"Failed to fetch debts for user {user_id}: {exc}"
            ) from exc
        return [self._to_record(row) for row in rows]

    def debt_exists(self, debt_id: str) -> bool:
        """Return True when a debt with this id is stored."""
        try:
            engine = self._db_port.get_debts_engine()
            with engine.connect() as conn:
                row = conn.execute(SELECT_DEBT_SQL, {"id": debt_id}).first()
        except SQLAlchemyError as exc:
            raise DebtRepositoryError(
                f"Failed to look up debt {debt_id}: {exc}"
            ) from exc
        return row is not None

    def add_debt(self, user_id: str, draft: DebtDraft) -> DebtRecord:
        """Insert a new debt and return it with its generated id."""
        now = self._now()
        debt_id = str(uuid.uuid4())
        params = {
            "id": debt_id,
            "user_id": user_id,
            "created_at": now,
            "updated_at": now,
            **self._draft_params(draft),
        }
        try:
            engine = self._db_port.get_debts_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_DEBT_SQL, params)
        except SQLAlchemyError as exc:
            raise DebtRepositoryError(
                f"Failed to add debt for user {user_id}: {exc}"
            ) from exc
        return DebtRecord(
            id=debt_id,
            name=draft.name,
            debt_type=draft.debt_type,
            amount=coerce_decimal(draft.amount),
            interest_rate=coerce_decimal(draft.interest_rate),
            minimum_payment=coerce_decimal(draft.minimum_payment),
            remaining_term=draft.remaining_term,
        )

    def update_debt(
        self,
        debt_id: str,
        draft: DebtDraft,
    ) -> DebtRecord | None:
        """Update a debt, returning the stored record or None if missing."""
        params = {
            "id": debt_id,
            "updated_at": self._now(),
            **self._draft_params(draft),
        }
        try:
            engine = self._db_port.get_debts_engine()
            with engine.begin() as conn:
                result = conn.execute(UPDATE_DEBT_SQL, params)
                if result.rowcount == 0:
                    return None
                row = conn.execute(SELECT_DEBT_SQL, {"id": debt_id}).first()
        except SQLAlchemyError as exc:
            raise DebtRepositoryError(
                f"Failed to update debt {debt_id}: {exc}"
            ) from exc
        return self._to_record(row) if row is not None else None

    def delete_debt(self, debt_id: str) -> bool:
        """Delete a debt, returning False when no row matched."""
        try:
            engine = self._db_port.get_debts_engine()
            with engine.begin() as conn:
                result = conn.execute(DELETE_DEBT_SQL, {"id": debt_id})
        except SQLAlchemyError as exc:
            raise DebtRepositoryError(
                f"Failed to delete debt {debt_id}: {exc}"
            ) from exc
        return result.rowcount > 0

    @staticmethod
    def _to_record(row) -> DebtRecord:
        return DebtRecord(
            id=str(row.id),
            name=row.name,
            debt_type=row.type,
            amount=coerce_decimal(row.amount),
            interest_rate=coerce_decimal(row.interest_rate),
            minimum_payment=coerce_decimal(row.minimum_payment),
            remaining_term=coerce_optional_int(row.remaining_term),
        )

    @staticmethod
    def _draft_params(draft: DebtDraft) -> dict:
        # sqlite3 cannot bind Decimal; strings keep exact values everywhere.
        return {
            "name": draft.name,
            "type": draft.debt_type,
            "amount": str(coerce_decimal(draft.amount)),
            "interest_rate": str(coerce_decimal(draft.interest_rate)),
            "minimum_payment": str(coerce_decimal(draft.minimum_payment)),
            "remaining_term": draft.remaining_term,
        }

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)


__all__ = [
    "SqlAlchemyDebtsRepository",
    "CREATE_DEBTS_SQL",
    "SELECT_DEBTS_SQL",
    "SELECT_DEBT_SQL",
    "INSERT_DEBT_SQL",
    "UPDATE_DEBT_SQL",
    "DELETE_DEBT_SQL",
]
