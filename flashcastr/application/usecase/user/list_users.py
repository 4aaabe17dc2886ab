"""List linked users use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import LinkedUserItem
from flashcastr.domain.service import LinkedUserService
from flashcastr.domain.value import Fid


class ListUsersRequest(BaseModel):
    """List users request."""

    username: Optional[str] = None
    fid: Optional[int] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[LinkedUserItem]


class ListUsersUseCase(BaseUseCase[ListUsersRequest, ListUsersResponse]):
    """Use case for listing linked users."""

    def __init__(self, linked_user_service: LinkedUserService) -> None:
        self.linked_user_service = linked_user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        with logfire.span("list_users.execute", page=request.page, limit=request.limit):
            users = await self.linked_user_service.list_users(
                username=request.username,
                fid=Fid(request.fid) if request.fid is not None else None,
                page=request.page,
                limit=request.limit,
            )
            return ListUsersResponse(
                users=[LinkedUserItem.from_domain(u) for u in users]
            )
