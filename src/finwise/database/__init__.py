"""Database layer for finwise application."""

from finwise.database.base import LedgerRepository
from finwise.database.errors import PoolError, PoolExhausted
from finwise.database.factories import create_repository, create_sqlite_repository
from finwise.database.pool import ConnectionPool
from finwise.database.sqlalchemy_db import SQLAlchemyLedgerRepository

__all__ = [
    "LedgerRepository",
    "PoolError",
    "PoolExhausted",
    "ConnectionPool",
    "SQLAlchemyLedgerRepository",
    "create_repository",
    "create_sqlite_repository",
]
