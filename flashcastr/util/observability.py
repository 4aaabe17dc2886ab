"""Logfire setup and instrumentation.

Services report through logfire directly:

    with logfire.span("signup_service.finalize", fid=fid):
        logfire.info("Activity imported", fid=fid, count=written)

Signer identifiers and the app mnemonic are credentials; attributes with
those names are scrubbed before export.
"""

from importlib.metadata import PackageNotFoundError, version

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from flashcastr.config import Settings

SERVICE_NAME = "flashcastr-api"

# Added to logfire's default patterns (password, api_key, secret, ...)
SCRUB_PATTERNS = ["signer_uuid", "mnemonic", "encryption_key"]

# Polled every few seconds by the platform health check
UNTRACED_URLS = "/health"


def send_to_logfire(settings: Settings) -> bool:
    """Whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise a configured
    token turns sending on.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def _service_version() -> str:
    try:
        return version(SERVICE_NAME)
    except PackageNotFoundError:
        return "unknown"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the process. Call once, before the app is built."""
    sending = send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=_service_version(),
        environment=settings.environment,
        send_to_logfire=sending,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=sending,
    )


def instrument_fastapi(app: FastAPI) -> None:
    # Headers stay out of traces: x-api-key guards the write routes
    logfire.instrument_fastapi(
        app, capture_headers=False, excluded_urls=UNTRACED_URLS
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound Neynar and Invaders calls."""
    logfire.instrument_httpx()
