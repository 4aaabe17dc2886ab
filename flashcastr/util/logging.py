"""Stdlib logging setup.

Services and adapters report through logfire; plain ``logging`` is kept for
route-level messages and for third-party libraries.
"""

import logging
import sys

from flashcastr.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Libraries that log every request or statement at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncpg")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the given settings.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("flashcastr").setLevel(level)

    get_logger(__name__).info(
        "Logging ready (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, usually ``get_logger(__name__)``."""
    return logging.getLogger(name)
