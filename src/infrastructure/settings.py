"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.constants import DEFAULT_MONTHLY_INCOME
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DebtDashboardSettings:
    """Settings for the debt dashboard adapters.

    Attributes:
        user_id: Owner of the debts shown by the dashboard and CLI.
        monthly_income: Initial monthly income assumption.
    """

    user_id: str | None = None
    monthly_income: Decimal = DEFAULT_MONTHLY_INCOME

    @classmethod
    def from_env(cls) -> "DebtDashboardSettings":
        """Build settings from environment variables.

        Returns:
            DebtDashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_user = os.getenv("DEBT_USER_ID", "").strip()
        raw_income = os.getenv("MONTHLY_INCOME")
        monthly_income = DEFAULT_MONTHLY_INCOME
        if raw_income:
            monthly_income = cls._parse_income(raw_income, logger=logger)
        return cls(user_id=raw_user or None, monthly_income=monthly_income)

    @staticmethod
    def _parse_income(raw_income: str, logger) -> Decimal:
        """Parse the income assumption, falling back to the default.

        Args:
            raw_income: Raw MONTHLY_INCOME value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed income, or the default when invalid.
        """
        try:
            income = Decimal(raw_income.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid MONTHLY_INCOME '{raw_income}'. "
                f"Using {DEFAULT_MONTHLY_INCOME}."
            )
            return DEFAULT_MONTHLY_INCOME
        if not income.is_finite() or income <= 0:
            logger.warning(
                f"MONTHLY_INCOME must be positive, got {raw_income}. "
                f"Using {DEFAULT_MONTHLY_INCOME}."
            )
            return DEFAULT_MONTHLY_INCOME
        return income


__all__ = ["DebtDashboardSettings"]
