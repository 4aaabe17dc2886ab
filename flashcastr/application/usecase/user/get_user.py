"""Get linked user use case."""

from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import LinkedUserItem
from flashcastr.domain.service import LinkedUserService
from flashcastr.domain.value import Fid


class GetUserRequest(BaseModel):
    """Get user request."""

    fid: int


class GetUserUseCase(BaseUseCase[GetUserRequest, LinkedUserItem]):
    """Use case for fetching one linked user."""

    def __init__(self, linked_user_service: LinkedUserService) -> None:
        self.linked_user_service = linked_user_service

    async def execute(self, request: GetUserRequest) -> LinkedUserItem:
        """Get a user by fid.

        Raises:
            NotFoundError: If the user does not exist or was deleted
        """
        user = await self.linked_user_service.get_user(Fid(request.fid))
        return LinkedUserItem.from_domain(user)
