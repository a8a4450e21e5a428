"""Domain constants for debt projections."""

from decimal import Decimal

DEBT_TYPES = (
    "Credit Card",
    "Student Loan",
    "Mortgage",
    "Auto Loan",
    "Personal Loan",
    "Medical Debt",
    "Tax Debt",
    "Other",
)

DEFAULT_DEBT_TYPE = "Other"

DEBT_TYPE_COLORS = {
    "Credit Card": "#30BFBF",
    "Student Loan": "#2CA58D",
    "Mortgage": "#0A2342",
    "Auto Loan": "#3B4754",
    "Personal Loan": "#90A955",
    "Medical Debt": "#E76F51",
    "Tax Debt": "#F4A261",
    DEFAULT_DEBT_TYPE: "#6D6875",
}

DEFAULT_MONTHLY_INCOME = Decimal("3000")

# 30 years
TIMELINE_MAX_MONTHS = 360

NOT_APPLICABLE_LABEL = "N/A"
NEVER_LABEL = "Never"
TIMELINE_START_LABEL = "Now"
TIMELINE_CONTINUES_LABEL = "..."


__all__ = [
    "DEBT_TYPES",
    "DEFAULT_DEBT_TYPE",
    "DEBT_TYPE_COLORS",
    "DEFAULT_MONTHLY_INCOME",
    "TIMELINE_MAX_MONTHS",
    "NOT_APPLICABLE_LABEL",
    "NEVER_LABEL",
    "TIMELINE_START_LABEL",
    "TIMELINE_CONTINUES_LABEL",
]
