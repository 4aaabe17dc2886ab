"""Get a user's flash summary use case."""

import logfire
from pydantic import BaseModel, Field

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import FlashItem
from flashcastr.config import IpfsSettings
from flashcastr.domain.service import LinkedUserService
from flashcastr.domain.value import Fid


class GetFlashesSummaryRequest(BaseModel):
    """Get flashes summary request."""

    fid: int
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class GetFlashesSummaryResponse(BaseModel):
    """A page of flashes with totals across all of the user's flashes."""

    flashes: list[FlashItem]
    flash_count: int
    cities: list[str]


class GetFlashesSummaryUseCase(
    BaseUseCase[GetFlashesSummaryRequest, GetFlashesSummaryResponse]
):
    """Use case for a user's flash page plus totals."""

    def __init__(
        self, linked_user_service: LinkedUserService, ipfs_settings: IpfsSettings
    ) -> None:
        self.linked_user_service = linked_user_service
        self.ipfs_settings = ipfs_settings

    async def execute(
        self, request: GetFlashesSummaryRequest
    ) -> GetFlashesSummaryResponse:
        with logfire.span("get_flashes_summary.execute", fid=request.fid):
            flashes, count, cities = await self.linked_user_service.get_flashes_summary(
                Fid(request.fid), page=request.page, limit=request.limit
            )
            return GetFlashesSummaryResponse(
                flashes=[
                    FlashItem.from_domain(f, self.ipfs_settings.gateway_url)
                    for f in flashes
                ],
                flash_count=count,
                cities=cities,
            )
