"""Process-level logging setup."""

import logging
from typing import Optional

from finwise.config import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(level: Optional[str]) -> int:
    """Map a LOG_LEVEL string to a logging level, defaulting to INFO."""
    if not level:
        return logging.INFO
    return _LEVELS.get(level.strip().lower(), logging.INFO)


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from logging settings.

    Args:
        config: Logging settings. When ``file_path`` is set, records are
            appended to that file instead of stderr.
    """
    if config.file_path:
        handler: logging.Handler = logging.FileHandler(
            config.file_path, mode="a", encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=resolve_level(config.level), handlers=[handler], force=True)
