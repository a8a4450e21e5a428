"""Database ports for the debt dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the debts database.

    Repositories depend on this protocol instead of concrete drivers or
    configuration details.
    """

    def get_debts_engine(self) -> Engine:
        """Get the engine for the debts database.

        Returns:
            Engine: SQLAlchemy engine connected to the debts store.
        """


__all__ = ["DatabaseEnginePort"]
