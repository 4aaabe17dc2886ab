"""Linked user routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel

from flashcastr.application.usecase.common import LinkedUserItem
from flashcastr.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    SetAutoCastRequest,
    SetAutoCastUseCase,
)
from flashcastr.config import AuthSettings
from flashcastr.domain.error import DomainError
from flashcastr.interface.api.security import require_api_key
from flashcastr.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class AutoCastAPIRequest(BaseModel):
    """API request for toggling auto cast."""

    auto_cast: bool


@router.get("", response_model=ListUsersResponse)
async def list_users(
    use_case: FromDishka[ListUsersUseCase],
    username: str | None = None,
    fid: int | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListUsersResponse:
    """List linked users.

    Example:
        GET /users?username=invader&page=1&limit=20
    """
    return await use_case.execute(
        ListUsersRequest(username=username, fid=fid, page=page, limit=limit)
    )


@router.get("/{fid}", response_model=LinkedUserItem)
async def get_user(fid: int, use_case: FromDishka[GetUserUseCase]) -> LinkedUserItem:
    try:
        return await use_case.execute(GetUserRequest(fid=fid))
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{fid}/auto-cast", response_model=LinkedUserItem)
async def set_auto_cast(
    fid: int,
    request: AutoCastAPIRequest,
    use_case: FromDishka[SetAutoCastUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_api_key: str | None = Header(default=None),
) -> LinkedUserItem:
    """Enable or disable automatic casting. Requires the x-api-key header."""
    require_api_key(x_api_key, auth_settings)
    try:
        return await use_case.execute(
            SetAutoCastRequest(fid=fid, auto_cast=request.auto_cast)
        )
    except DomainError as e:
        logfire.warn("Auto cast update failed", fid=fid, error=str(e))
        raise to_http_exception(e)


@router.delete("/{fid}", response_model=DeleteUserResponse)
async def delete_user(
    fid: int,
    use_case: FromDishka[DeleteUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_api_key: str | None = Header(default=None),
) -> DeleteUserResponse:
    """Unlink a user and hide their flashes. Requires the x-api-key header."""
    require_api_key(x_api_key, auth_settings)
    try:
        return await use_case.execute(DeleteUserRequest(fid=fid))
    except DomainError as e:
        logfire.warn("User deletion failed", fid=fid, error=str(e))
        raise to_http_exception(e)
