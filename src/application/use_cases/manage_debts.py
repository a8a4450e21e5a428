"""Use case to add, edit, and remove a user's debts."""

from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.exceptions import DebtNotFoundError
from src.domain.models import DebtDraft, DebtRecord
from src.domain.services.validation import validate_debt_draft
from src.infrastructure.logging.logger import get_app_logger


class ManageDebtsUseCase:
    """Validate debt drafts and apply them to storage."""

    def __init__(
        self,
        debts_repository: DebtsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            debts_repository: Port storing debt records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._debts_repository = debts_repository
        self._logger = logger or get_app_logger()

    def add_debt(self, user_id: str, draft: DebtDraft) -> DebtRecord:
        """Validate and store a new debt.

        Raises:
            DebtValidationError: If the draft fails validation.
        """
        validate_debt_draft(draft)
        record = self._debts_repository.add_debt(user_id, draft)
        self._logger.info(
            f"Added {draft.debt_type} debt {record.id} of {draft.amount} "
            f"for user {user_id}"
        )
        return record

    def update_debt(self, debt_id: str, draft: DebtDraft) -> DebtRecord:
        """Validate and apply new values to an existing debt.

        Raises:
            DebtValidationError: If the draft fails validation.
            DebtNotFoundError: If the debt does not exist.
        """
        validate_debt_draft(draft)
        record = self._debts_repository.update_debt(debt_id, draft)
        if record is None:
            self._logger.warning(f"Cannot update missing debt {debt_id}")
            raise DebtNotFoundError(debt_id)
        self._logger.info(f"Updated debt {debt_id}")
        return record

    def delete_debt(self, debt_id: str) -> None:
        """Delete an existing debt.

        Raises:
            DebtNotFoundError: If the debt does not exist.
        """
        if not self._debts_repository.debt_exists(debt_id):
            self._logger.warning(f"No debt found with ID: {debt_id}")
            raise DebtNotFoundError(debt_id)
        if not self._debts_repository.delete_debt(debt_id):
            raise DebtNotFoundError(debt_id)
        self._logger.info(f"Deleted debt {debt_id}")


__all__ = ["ManageDebtsUseCase"]
