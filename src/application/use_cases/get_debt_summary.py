"""Use case to fetch a user's debts and project their summary."""

from datetime import date

from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.constants import DEFAULT_MONTHLY_INCOME
from src.domain.models import DebtSummary
from src.domain.services.debt_summary import generate_debt_summary
from src.infrastructure.logging.logger import get_app_logger


class GetDebtSummaryUseCase:
    """Compute the debt summary of a user from stored debts."""

    def __init__(
        self,
        debts_repository: DebtsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            debts_repository: Port providing the user's debt records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._debts_repository = debts_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        monthly_income=DEFAULT_MONTHLY_INCOME,
        today: date | None = None,
    ) -> DebtSummary:
        """Return the debt summary for the user.

        Args:
            user_id: Owner of the debts.
            monthly_income: Assumed monthly income.
            today: Optional reference date for date dependent fields.

        Returns:
            DebtSummary: Projection computed by the domain engine.
        """
        debts = self._debts_repository.fetch_debts(user_id)
        self._logger.info(f"Fetched {len(debts)} debts for user {user_id}")

        summary = generate_debt_summary(debts, monthly_income, today)

        self._logger.info(
            f"Debt summary computed: total={summary.total_debt}, "
            f"monthly_payments={summary.monthly_payments}, "
            f"debt_free={summary.debt_free_date}"
        )
        return summary


__all__ = ["GetDebtSummaryUseCase", "DebtSummary"]
