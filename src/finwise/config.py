"""Environment-driven settings for finwise.

The connection descriptor itself is not configured here; it always comes
from :class:`finwise.credentials.CredentialStore` so that the credential
source priority is applied in one place.
"""

from dataclasses import dataclass, field
import os
from typing import Mapping, Optional

from finwise.credentials.errors import ConfigurationError

DEFAULT_POOL_SIZE = 10
DEFAULT_TIMEOUT_SECONDS = 30


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {value}")
    return value


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection pool sizing.

    Attributes:
        pool_size: Maximum number of concurrently open connections.
        timeout_seconds: How long a checkout waits for a free connection.
    """

    pool_size: int = DEFAULT_POOL_SIZE
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ServerConfig:
    host: str = "localhost"
    port: int = 8080


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "info"
    file_path: Optional[str] = None


@dataclass(frozen=True)
class Config:
    """Top-level settings object shared by the CLI and the database layer."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Config: Settings with defaults applied for unset variables.

        Raises:
            ConfigurationError: If a numeric variable is not a positive integer.
        """
        if environ is None:
            environ = os.environ
        return cls(
            database=DatabaseConfig(
                pool_size=_positive_int(environ, "DB_POOL_SIZE", DEFAULT_POOL_SIZE),
                timeout_seconds=_positive_int(environ, "DB_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            ),
            server=ServerConfig(
                host=environ.get("SERVER_HOST") or "localhost",
                port=_positive_int(environ, "SERVER_PORT", 8080),
            ),
            logging=LoggingConfig(
                level=environ.get("LOG_LEVEL") or "info",
                file_path=environ.get("LOG_FILE") or None,
            ),
        )


__all__ = ["Config", "DatabaseConfig", "ServerConfig", "LoggingConfig"]
