"""Application use cases package."""

from .debt_dashboard_session import DebtDashboardSession
from .get_debt_summary import DebtSummary, GetDebtSummaryUseCase
from .manage_debts import ManageDebtsUseCase

__all__ = [
    "DebtDashboardSession",
    "DebtSummary",
    "GetDebtSummaryUseCase",
    "ManageDebtsUseCase",
]
