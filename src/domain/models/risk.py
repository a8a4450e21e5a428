"""Domain models for debt risk classification."""

from dataclasses import dataclass
from typing import Literal

RiskTier = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class RiskAssessment:
    """Risk tiers derived from a debt summary.

    Attributes:
        payment_to_income: Tier for the payment-to-income ratio.
        debt_free_horizon: Tier for the months until debt-free.
        overall: Worst of the individual tiers.
    """

    payment_to_income: RiskTier
    debt_free_horizon: RiskTier
    overall: RiskTier


__all__ = ["RiskTier", "RiskAssessment"]
