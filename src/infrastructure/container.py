"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.debts_repository import DebtsRepositoryPort
from src.application.use_cases.debt_dashboard_session import (
    DebtDashboardSession,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.debts_repository import SqlAlchemyDebtsRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DebtDashboardSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_debts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> DebtsRepositoryPort:
    """Return the debts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyDebtsRepository(resolved_db)


def build_dashboard_session(
    settings: DebtDashboardSettings | None = None,
    debts_repository: DebtsRepositoryPort | None = None,
) -> DebtDashboardSession:
    """Return a dashboard session for the configured user."""
    resolved_settings = settings or DebtDashboardSettings.from_env()
    return DebtDashboardSession(
        debts_repository=debts_repository or build_debts_repository(),
        user_id=resolved_settings.user_id,
        monthly_income=resolved_settings.monthly_income,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_debts_repository",
    "build_dashboard_session",
]
