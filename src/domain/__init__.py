"""Domain package for debt projection rules and core models."""

from .constants import (
    DEBT_TYPE_COLORS,
    DEBT_TYPES,
    DEFAULT_DEBT_TYPE,
    DEFAULT_MONTHLY_INCOME,
    TIMELINE_MAX_MONTHS,
)
from .exceptions import (
    DebtDashboardError,
    DebtNotFoundError,
    DebtRepositoryError,
    DebtValidationError,
)
from .models import (
    DebtDraft,
    DebtFreeDate,
    DebtRecord,
    DebtSummary,
    DebtTypeAmount,
    RiskAssessment,
    TimelinePoint,
)
from .services import (
    PAYOFF_NEVER,
    calculate_debt_free_date,
    calculate_monthly_interest,
    calculate_time_to_payoff,
    generate_debt_summary,
    generate_payment_timeline,
    group_debts_by_type,
    validate_debt_draft,
)
from .policies import assess_debt_risk

__all__ = [
    "DEBT_TYPE_COLORS",
    "DEBT_TYPES",
    "DEFAULT_DEBT_TYPE",
    "DEFAULT_MONTHLY_INCOME",
    "TIMELINE_MAX_MONTHS",
    "DebtDashboardError",
    "DebtNotFoundError",
    "DebtRepositoryError",
    "DebtValidationError",
    "DebtDraft",
    "DebtFreeDate",
    "DebtRecord",
    "DebtSummary",
    "DebtTypeAmount",
    "RiskAssessment",
    "TimelinePoint",
    "PAYOFF_NEVER",
    "calculate_debt_free_date",
    "calculate_monthly_interest",
    "calculate_time_to_payoff",
    "generate_debt_summary",
    "generate_payment_timeline",
    "group_debts_by_type",
    "validate_debt_draft",
    "assess_debt_risk",
]
