"""Domain models package."""

from .debts import (
    DebtDraft,
    DebtFreeDate,
    DebtRecord,
    DebtSummary,
    DebtTypeAmount,
    TimelinePoint,
)
from .risk import RiskAssessment, RiskTier

__all__ = [
    "DebtRecord",
    "DebtDraft",
    "DebtTypeAmount",
    "TimelinePoint",
    "DebtFreeDate",
    "DebtSummary",
    "RiskAssessment",
    "RiskTier",
]
