"""Get flashes use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import FlashItem
from flashcastr.config import IpfsSettings
from flashcastr.domain.service import FlashService
from flashcastr.domain.value import Fid


class GetFlashesRequest(BaseModel):
    """Get flashes request. Without filters, the global feed."""

    fid: Optional[int] = None
    username: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class GetFlashesResponse(BaseModel):
    """Get flashes response."""

    flashes: list[FlashItem]


class GetFlashesUseCase(BaseUseCase[GetFlashesRequest, GetFlashesResponse]):
    """Use case for paging through attributed flashes."""

    def __init__(self, flash_service: FlashService, ipfs_settings: IpfsSettings) -> None:
        self.flash_service = flash_service
        self.ipfs_settings = ipfs_settings

    async def execute(self, request: GetFlashesRequest) -> GetFlashesResponse:
        with logfire.span(
            "get_flashes.execute",
            fid=request.fid,
            username=request.username,
            page=request.page,
        ):
            flashes = await self.flash_service.list_flashes(
                fid=Fid(request.fid) if request.fid is not None else None,
                username=request.username,
                page=request.page,
                limit=request.limit,
            )
            gateway = self.ipfs_settings.gateway_url
            return GetFlashesResponse(
                flashes=[FlashItem.from_domain(f, gateway) for f in flashes]
            )
