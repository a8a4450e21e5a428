"""Risk classification policy consuming debt summaries.

Thresholds are presentation policy, kept outside the projection engine.
"""

from decimal import Decimal

from src.domain.models import DebtSummary, RiskAssessment, RiskTier

HIGH_PAYMENT_TO_INCOME_RATIO = Decimal("0.43")
MEDIUM_PAYMENT_TO_INCOME_RATIO = Decimal("0.36")
MEDIUM_DEBT_FREE_MONTHS = 120

_TIER_ORDER: dict[str, int] = {"low": 0, "medium": 1, "high": 2}


def classify_payment_to_income(ratio: Decimal) -> RiskTier:
    """Bucket a payment-to-income ratio into a risk tier."""
    if ratio > HIGH_PAYMENT_TO_INCOME_RATIO:
        return "high"
    if ratio > MEDIUM_PAYMENT_TO_INCOME_RATIO:
        return "medium"
    return "low"


def classify_debt_free_horizon(months: int | float) -> RiskTier:
    """Bucket a debt-free horizon into a risk tier."""
    if months == float("inf"):
        return "high"
    if months > MEDIUM_DEBT_FREE_MONTHS:
        return "medium"
    return "low"


def assess_debt_risk(summary: DebtSummary) -> RiskAssessment:
    """Classify a summary on both risk axes.

    Args:
        summary: Summary produced by the projection engine.

    Returns:
        RiskAssessment: Individual tiers and the worst of them.
    """
    ratio_tier = classify_payment_to_income(summary.payment_to_income_ratio)
    horizon_tier = classify_debt_free_horizon(summary.debt_free_months)
    overall = max(ratio_tier, horizon_tier, key=_TIER_ORDER.__getitem__)
    return RiskAssessment(
        payment_to_income=ratio_tier,
        debt_free_horizon=horizon_tier,
        overall=overall,
    )


__all__ = [
    "HIGH_PAYMENT_TO_INCOME_RATIO",
    "MEDIUM_PAYMENT_TO_INCOME_RATIO",
    "MEDIUM_DEBT_FREE_MONTHS",
    "classify_payment_to_income",
    "classify_debt_free_horizon",
    "assess_debt_risk",
]
