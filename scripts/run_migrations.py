#!/usr/bin/env python3
"""Apply the StackIt schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to revision
    python scripts/run_migrations.py base       # downgrade (also -1, -2, ...)
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Move the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target):
        try:
            if target == "base" or target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception:
            # A failed migration must stop the deploy before the API starts
            logfire.exception("Database migration failed", target=target)
            raise

    logfire.info("Database migrations applied", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
