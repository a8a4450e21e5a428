"""Port for reading and editing a user's debts."""

from typing import Protocol

from src.domain.models import DebtDraft, DebtRecord


class DebtsRepositoryPort(Protocol):
    """Port exposing storage of debt records.

    Implementations raise DebtRepositoryError when the backend fails.
    """

    def fetch_debts(self, user_id: str) -> list[DebtRecord]:
        """Return the user's debts, most recently created first."""

    def debt_exists(self, debt_id: str) -> bool:
        """Return True when a debt with this id is stored."""

    def add_debt(self, user_id: str, draft: DebtDraft) -> DebtRecord:
        """Store a new debt and return it with its generated id."""

    def update_debt(self, debt_id: str, draft: DebtDraft) -> DebtRecord | None:
        """Replace the editable fields of a debt, None when it is missing."""

    def delete_debt(self, debt_id: str) -> bool:
        """Delete a debt, returning False when nothing was deleted."""


__all__ = ["DebtsRepositoryPort"]
