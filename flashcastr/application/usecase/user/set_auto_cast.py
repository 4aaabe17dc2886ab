"""Set auto cast use case."""

import logfire
from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import LinkedUserItem
from flashcastr.domain.service import LinkedUserService
from flashcastr.domain.value import Fid


class SetAutoCastRequest(BaseModel):
    """Set auto cast request."""

    fid: int
    auto_cast: bool


class SetAutoCastUseCase(BaseUseCase[SetAutoCastRequest, LinkedUserItem]):
    """Use case for toggling automatic publishing of new flashes."""

    def __init__(self, linked_user_service: LinkedUserService) -> None:
        self.linked_user_service = linked_user_service

    async def execute(self, request: SetAutoCastRequest) -> LinkedUserItem:
        """Update the user's auto_cast preference.

        Raises:
            NotFoundError: If the user does not exist or was deleted
        """
        with logfire.span(
            "set_auto_cast.execute", fid=request.fid, auto_cast=request.auto_cast
        ):
            user = await self.linked_user_service.set_auto_cast(
                Fid(request.fid), request.auto_cast
            )
            return LinkedUserItem.from_domain(user)
