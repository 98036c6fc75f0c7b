"""Factory functions for creating ledger repositories."""

import logging
from typing import Optional

from finwise.config import Config, DEFAULT_POOL_SIZE, DEFAULT_TIMEOUT_SECONDS
from finwise.credentials.store import CredentialStore
from finwise.database.pool import ConnectionPool
from finwise.database.sqlalchemy_db import SQLAlchemyLedgerRepository

logger = logging.getLogger(__name__)


def create_repository(
    config: Optional[Config] = None,
    store: Optional[CredentialStore] = None,
) -> SQLAlchemyLedgerRepository:
    """Create a repository for the configured backing store.

    Resolves the connection descriptor through the credential store, then
    builds a pool sized from the database settings.

    Args:
        config: Settings; read from the environment when None
        store: Credential store; uses the running user's home when None

    Returns:
        SQLAlchemyLedgerRepository bound to a fresh ConnectionPool

    Raises:
        ConfigurationError: If no credential source resolves
        PoolError: If the database cannot be reached
    """
    if config is None:
        config = Config.from_env()
    if store is None:
        store = CredentialStore()

    descriptor = store.resolve()
    logger.info("Connecting with credentials from %s", descriptor.source.value)
    pool = ConnectionPool(
        descriptor.url,
        max_size=config.database.pool_size,
        timeout_seconds=config.database.timeout_seconds,
    )
    return SQLAlchemyLedgerRepository(pool)


def create_sqlite_repository(
    database_path: str,
    pool_size: int = DEFAULT_POOL_SIZE,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> SQLAlchemyLedgerRepository:
    """Create a repository on a SQLite file, bypassing credential resolution.

    Args:
        database_path: Path to SQLite database file

    Returns:
        SQLAlchemyLedgerRepository configured for SQLite
    """
    pool = ConnectionPool(
        f"sqlite:///{database_path}", max_size=pool_size, timeout_seconds=timeout_seconds
    )
    return SQLAlchemyLedgerRepository(pool)
