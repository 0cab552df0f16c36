"""Stdlib logging for uvicorn, alembic and other libraries.

Application code logs through logfire directly. Library records are printed
to stdout and also forwarded to logfire so they show up next to the spans
of the request that produced them.
"""

import logging
import sys

import logfire

from stackit.config import Settings

# Loggers that are noisy at INFO and add nothing over the logfire traces
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncio", "uvicorn.access")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment."""
    level = _level_for(settings)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.basicConfig(
        level=level,
        handlers=[console, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
