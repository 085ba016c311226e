"""
Process logging setup.

Live deployments log at INFO. Anything else logs at DEBUG so the SQL-level
traces from the repositories show up during development.
"""

from __future__ import annotations

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def log_level(settings: Settings) -> int:
    return logging.INFO if settings.is_live else logging.DEBUG


def configure_logging(settings: Settings) -> None:
    level = log_level(settings)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # asyncpg is chatty at DEBUG.
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger(__name__).info("logging_configured live=%s level=%s", settings.is_live, logging.getLevelName(level))
