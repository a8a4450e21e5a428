"""Session state for a user's debt dashboard.

The session owns the current debt list and income assumption. Fetching
debts goes through the repository and may fail; recomputing the summary is
a pure call into the domain engine and happens on every change.
"""

from collections.abc import Callable
from datetime import date

from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.constants import DEFAULT_MONTHLY_INCOME
from src.domain.exceptions import DebtRepositoryError
from src.domain.models import DebtRecord, DebtSummary
from src.domain.services.debt_summary import generate_debt_summary
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class DebtDashboardSession:
    """Hold one user's debts, income, and derived summary."""

    def __init__(
        self,
        debts_repository: DebtsRepositoryPort,
        user_id: str | None,
        monthly_income=DEFAULT_MONTHLY_INCOME,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the session.

        Args:
            debts_repository: Port providing the user's debt records.
            user_id: Signed-in user, or None when nobody is signed in.
            monthly_income: Initial income assumption.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the reference date for projections.
        """
        self._debts_repository = debts_repository
        self._user_id = user_id
        self._monthly_income = coerce_decimal(monthly_income)
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._debts: tuple[DebtRecord, ...] = ()
        self._summary: DebtSummary | None = None
        self._is_loading = False
        self._last_error: str | None = None

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def debts(self) -> tuple[DebtRecord, ...]:
        return self._debts

    @property
    def summary(self) -> DebtSummary | None:
        return self._summary

    @property
    def monthly_income(self):
        return self._monthly_income

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def refresh(self) -> DebtSummary | None:
        """Fetch the user's debts and recompute the summary.

        A storage failure is logged and recorded in ``last_error``; the
        previous debts and summary are kept.

        Returns:
            DebtSummary | None: The current summary after the refresh.
        """
        if self._user_id is None:
            self._debts = ()
            self._summary = None
            self._last_error = None
            return None

        self._is_loading = True
        try:
            debts = self._debts_repository.fetch_debts(self._user_id)
        except DebtRepositoryError as exc:
            self._last_error = str(exc)
            self._logger.error(
                f"Failed to load debts for user {self._user_id}: {exc}"
            )
            return self._summary
        finally:
            self._is_loading = False

        self._last_error = None
        self._debts = tuple(debts)
        self._logger.info(
            f"Loaded {len(self._debts)} debts for user {self._user_id}"
        )
        return self.recompute()

    def set_monthly_income(self, monthly_income) -> DebtSummary | None:
        """Change the income assumption and recompute the summary."""
        self._monthly_income = coerce_decimal(monthly_income)
        if self._user_id is None:
            return None
        return self.recompute()

    def recompute(self) -> DebtSummary:
        """Recompute the summary from the current debts and income."""
        self._summary = generate_debt_summary(
            self._debts,
            self._monthly_income,
            self._clock(),
        )
        return self._summary


__all__ = ["DebtDashboardSession"]
