"""Application ports package."""

from .database import DatabaseEnginePort
from .debts_repository import DebtsRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "DebtsRepositoryPort",
]
