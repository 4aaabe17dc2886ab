"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashcastr.config import Settings
from flashcastr.interface.api.routes import (
    flashes,
    health,
    identifications,
    signup,
    stats,
    users,
)
from flashcastr.util.di.container import create_container, setup_di
from flashcastr.util.observability import instrument_fastapi, instrument_httpx


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this (start_app.py does it).

    Args:
        settings: Settings to use (loaded from the environment when None)
        container: DI container (production container when None)
    """
    settings = settings or Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Flashcastr API",
        description="Links Farcaster accounts to Space Invaders players and serves their flashes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-API-Key"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(signup.router)
    app_instance.include_router(users.router)
    app_instance.include_router(flashes.router)
    app_instance.include_router(identifications.router)
    app_instance.include_router(stats.router)

    return app_instance
