"""Shared-secret check for privileged routes."""

import secrets

from fastapi import HTTPException, status

from flashcastr.config import AuthSettings
from flashcastr.interface.error import UnauthorizedError


def check_api_key(provided: str | None, auth_settings: AuthSettings) -> None:
    """Raise ``UnauthorizedError`` unless ``provided`` matches the configured key."""
    if not provided or not secrets.compare_digest(
        provided.encode("utf-8"), auth_settings.api_key.encode("utf-8")
    ):
        raise UnauthorizedError("Invalid or missing API key")


def require_api_key(provided: str | None, auth_settings: AuthSettings) -> None:
    """Route guard: 401 unless the x-api-key header is valid."""
    try:
        check_api_key(provided, auth_settings)
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
