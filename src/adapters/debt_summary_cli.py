"""CLI adapter printing the debt summary of the configured user.

The user and income assumption come from DEBT_USER_ID and MONTHLY_INCOME.
"""

from src.application.use_cases.get_debt_summary import GetDebtSummaryUseCase
from src.domain.policies.risk import assess_debt_risk
from src.infrastructure.container import build_debts_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DebtDashboardSettings


def _format_money(value) -> str:
    return f"${value:,.2f}"


def _format_months(months: int | float) -> str:
    if months == float("inf"):
        return "never"
    return f"{months} months"


def main() -> None:
    """Compute and print the debt summary."""
    logger = get_app_logger()
    settings = DebtDashboardSettings.from_env()
    if settings.user_id is None:
        logger.warning("DEBT_USER_ID is required to compute a debt summary.")
        return

    use_case = GetDebtSummaryUseCase(
        debts_repository=build_debts_repository(),
        logger=logger,
    )
    summary = use_case.execute(
        settings.user_id,
        monthly_income=settings.monthly_income,
    )
    risk = assess_debt_risk(summary)

    print(
        f"Debt summary (user={settings.user_id}, "
        f"income={_format_money(settings.monthly_income)})"
    )
    print(
        f"Total debt: {_format_money(summary.total_debt)}, "
        f"monthly payments: {_format_money(summary.monthly_payments)}, "
        f"interest YTD: {_format_money(summary.interest_paid_ytd)}"
    )
    print(
        f"Debt-free: {summary.debt_free_date} "
        f"({_format_months(summary.debt_free_months)})"
    )
    print(
        f"Remaining payments: "
        f"{_format_money(summary.total_remaining_payments)}, "
        f"future interest: {_format_money(summary.future_interest)}"
    )
    print(
        f"Payment-to-income: {summary.payment_to_income_ratio:.2%} "
        f"(risk={risk.overall})"
    )
    for item in summary.debt_by_type:
        print(f"  {item.name}: {_format_money(item.value)}")


if __name__ == "__main__":  # pragma: no cover
    main()
