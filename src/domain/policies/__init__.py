"""Domain policies package."""

from .risk import (
    assess_debt_risk,
    classify_debt_free_horizon,
    classify_payment_to_income,
)

__all__ = [
    "assess_debt_risk",
    "classify_debt_free_horizon",
    "classify_payment_to_income",
]
