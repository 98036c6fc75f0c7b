"""Bounded pool of connections to the backing store.

Checkout policy: when all ``max_size`` connections are in use, ``checkout()``
blocks for up to ``timeout_seconds`` waiting for one to be returned, then
raises :class:`PoolExhausted`. There is no overflow beyond ``max_size``.
"""

from contextlib import contextmanager
import logging
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError, TimeoutError as SQLAlchemyTimeoutError
from sqlalchemy.pool import QueuePool

from finwise.database.errors import PoolError, PoolExhausted

logger = logging.getLogger(__name__)


def engine_url(descriptor: str) -> str:
    """Translate a ``postgres://`` descriptor into a SQLAlchemy URL.

    SQLAlchemy only accepts the ``postgresql`` scheme; other URLs pass
    through unchanged.
    """
    if descriptor.startswith("postgres://"):
        return "postgresql+psycopg2://" + descriptor[len("postgres://"):]
    return descriptor


def _describe(error: SQLAlchemyError) -> str:
    return str(getattr(error, "orig", None) or error).strip()


def _serialize_sqlite_writes(engine: Engine) -> None:
    """Make every SQLite transaction take the write lock when it begins.

    pysqlite defers BEGIN until the first write, so a read-modify-write
    such as a transfer could read a balance another connection is about to
    change. Driver-level transaction handling is switched off and each
    SQLAlchemy transaction starts with BEGIN IMMEDIATE instead; SQLite has
    no row locks, so this is what ``SELECT ... FOR UPDATE`` maps to.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(connection):
        connection.exec_driver_sql("BEGIN IMMEDIATE")


class ConnectionPool:
    """Caps concurrently open connections at ``max_size``."""

    def __init__(self, descriptor: str, max_size: int, timeout_seconds: float = 30):
        """Create the pool and verify the store is reachable.

        Args:
            descriptor: Connection URL, e.g. ``postgres://user:pw@localhost/finance_wise``
            max_size: Maximum number of concurrently checked-out connections
            timeout_seconds: How long ``checkout()`` waits when the pool is full

        Raises:
            PoolError: If the arguments are invalid or the store cannot be reached
        """
        if max_size < 1:
            raise PoolError(f"Pool size must be at least 1, got {max_size}")
        if timeout_seconds < 0:
            raise PoolError(f"Pool timeout must not be negative, got {timeout_seconds}")

        self.max_size = max_size
        self.timeout_seconds = timeout_seconds

        url = engine_url(descriptor)
        connect_args = {}
        if url.startswith("sqlite"):
            # Pooled SQLite connections may be returned from other threads
            connect_args["check_same_thread"] = False
            # Waiting on the SQLite write lock follows the checkout timeout
            connect_args["timeout"] = timeout_seconds

        try:
            self.engine: Engine = create_engine(
                url,
                poolclass=QueuePool,
                pool_size=max_size,
                max_overflow=0,
                pool_timeout=timeout_seconds,
                pool_pre_ping=True,
                connect_args=connect_args,
            )
        except SQLAlchemyError as e:
            raise PoolError(f"Invalid connection descriptor: {_describe(e)}") from e

        if self.engine.dialect.name == "sqlite":
            _serialize_sqlite_writes(self.engine)

        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as e:
            self.engine.dispose()
            raise PoolError(f"Could not connect to the database: {_describe(e)}") from e

        logger.debug(
            "Connection pool ready (max_size=%d, timeout=%ss)", max_size, timeout_seconds
        )

    @contextmanager
    def checkout(self) -> Iterator[Connection]:
        """Yield an exclusively owned connection, returning it on exit.

        The connection goes back to the pool on every exit path, including
        exceptions raised inside the ``with`` block.

        Raises:
            PoolExhausted: If no connection frees up within ``timeout_seconds``
            PoolError: If a new connection cannot be opened
        """
        try:
            connection = self.engine.connect()
        except SQLAlchemyTimeoutError as e:
            raise PoolExhausted(
                f"All {self.max_size} database connections are in use "
                f"(waited {self.timeout_seconds}s)"
            ) from e
        except SQLAlchemyError as e:
            raise PoolError(f"Could not open a database connection: {_describe(e)}") from e

        try:
            yield connection
        finally:
            connection.close()

    @property
    def checked_out(self) -> int:
        """Number of connections currently in use."""
        return self.engine.pool.checkedout()

    def close(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()

    def __enter__(self) -> "ConnectionPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["ConnectionPool", "engine_url"]
