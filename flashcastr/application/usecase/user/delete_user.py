"""Delete linked user use case."""

import logfire
from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.domain.service import LinkedUserService
from flashcastr.domain.value import Fid


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    fid: int


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    success: bool
    message: str


class DeleteUserUseCase(BaseUseCase[DeleteUserRequest, DeleteUserResponse]):
    """Use case for unlinking a user.

    The user and their attributed flashes are soft-deleted in the request
    transaction, so either both are marked or neither is.
    """

    def __init__(self, linked_user_service: LinkedUserService) -> None:
        self.linked_user_service = linked_user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        with logfire.span("delete_user.execute", fid=request.fid):
            removed = await self.linked_user_service.delete_user(Fid(request.fid))
            return DeleteUserResponse(
                success=True,
                message=f"Deleted user {request.fid} and {removed} flashes",
            )
