#!/usr/bin/env python3
"""Serve the StackIt API with uvicorn."""

import sys

import logfire
import uvicorn

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then hand the process over to uvicorn."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting StackIt API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "stackit.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development",
            proxy_headers=True,
            log_config=None,  # keep the handlers installed by setup_logging
        )
    except Exception:
        logfire.exception("StackIt API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
