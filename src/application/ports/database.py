"""Database ports for the finance tracker.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the finance database engine.

    Repositories depend on this protocol instead of concrete drivers or
    configuration details.
    """

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine holding the transactions table.
        """


__all__ = ["DatabaseEnginePort"]
