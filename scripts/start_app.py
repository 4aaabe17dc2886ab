#!/usr/bin/env python3
"""Serve the API with uvicorn.

Outside development the process refuses to start while required secrets
are unset, instead of failing on the first signup.
"""

import sys

import logfire
import uvicorn

from flashcastr.config import Settings
from flashcastr.util.error import ConfigurationError
from flashcastr.util.logging import setup_logging
from flashcastr.util.observability import configure_logfire


def preflight(settings: Settings) -> None:
    """Check required secrets; raise in staging/production, warn otherwise."""
    missing = settings.missing_settings()
    if not missing:
        return
    if settings.environment in ("staging", "production"):
        raise ConfigurationError(
            f"Missing required settings: {', '.join(missing)}", setting=missing[0]
        )
    logfire.warn("Running with unset secrets", missing=missing)


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        preflight(settings)
        logfire.info(
            "Starting Flashcastr API",
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "flashcastr.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
