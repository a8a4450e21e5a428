"""Database infrastructure for the debt dashboard.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the debts database. Connection settings come from the
environment, optionally loaded from a ``.env`` file.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DEBTS_DB_URL_ENV = "DEBTS_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_debts_engine: Optional[Engine] = None


def get_debts_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the debts database.

    Returns:
        Engine: Lazily initialized engine connected to the debts store.
    """
    global _debts_engine
    if _debts_engine is None:
        db_url = _get_env_var(DEBTS_DB_URL_ENV)
        _debts_engine = _create_engine(db_url)
    return _debts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories depend only on the protocol.
    """

    def get_debts_engine(self) -> Engine:
        """Get the engine for the debts database.

        Returns:
            Engine: SQLAlchemy engine connected to the debts store.
        """
        return get_debts_engine()


__all__ = [
    "DEBTS_DB_URL_ENV",
    "get_debts_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
