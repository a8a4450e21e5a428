"""Domain services package."""

from .amortization import (
    PAYOFF_NEVER,
    calculate_monthly_interest,
    calculate_time_to_payoff,
    is_non_amortizing,
)
from .date_labels import format_future_date, format_month_year
from .debt_summary import (
    calculate_debt_free_date,
    calculate_future_interest,
    calculate_interest_paid_ytd,
    calculate_payment_to_income_ratio,
    calculate_total_debt,
    calculate_total_monthly_payment,
    calculate_total_remaining_payments,
    generate_debt_summary,
    get_debt_type_color,
    group_debts_by_type,
)
from .timeline import (
    calculate_weighted_interest_rate,
    generate_payment_timeline,
)
from .validation import collect_debt_draft_errors, validate_debt_draft

__all__ = [
    "PAYOFF_NEVER",
    "calculate_monthly_interest",
    "calculate_time_to_payoff",
    "is_non_amortizing",
    "format_future_date",
    "format_month_year",
    "calculate_debt_free_date",
    "calculate_future_interest",
    "calculate_interest_paid_ytd",
    "calculate_payment_to_income_ratio",
    "calculate_total_debt",
    "calculate_total_monthly_payment",
    "calculate_total_remaining_payments",
    "generate_debt_summary",
    "get_debt_type_color",
    "group_debts_by_type",
    "calculate_weighted_interest_rate",
    "generate_payment_timeline",
    "collect_debt_draft_errors",
    "validate_debt_draft",
]
