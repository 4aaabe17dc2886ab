"""Get a single flash use case."""

import logfire
from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import UnifiedFlashItem
from flashcastr.config import IpfsSettings
from flashcastr.domain.service import FlashService
from flashcastr.domain.value import FlashId


class GetFlashRequest(BaseModel):
    """Get flash request."""

    flash_id: int


class GetFlashUseCase(BaseUseCase[GetFlashRequest, UnifiedFlashItem]):
    """Use case for one catalog flash with its attribution and identification."""

    def __init__(self, flash_service: FlashService, ipfs_settings: IpfsSettings) -> None:
        self.flash_service = flash_service
        self.ipfs_settings = ipfs_settings

    async def execute(self, request: GetFlashRequest) -> UnifiedFlashItem:
        """Execute get flash.

        Raises:
            NotFoundError: If the catalog has no such flash
        """
        with logfire.span("get_flash.execute", flash_id=request.flash_id):
            unified = await self.flash_service.get_flash(FlashId(request.flash_id))
            return UnifiedFlashItem.from_unified(
                unified, self.ipfs_settings.gateway_url
            )
