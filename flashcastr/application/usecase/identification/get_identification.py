"""Get a flash identification use case."""

from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import FlashIdentificationItem
from flashcastr.config import IpfsSettings
from flashcastr.domain.service import FlashService


class GetIdentificationRequest(BaseModel):
    """Get identification request."""

    id: int


class GetIdentificationUseCase(
    BaseUseCase[GetIdentificationRequest, FlashIdentificationItem]
):
    """Use case for a single identification."""

    def __init__(self, flash_service: FlashService, ipfs_settings: IpfsSettings) -> None:
        self.flash_service = flash_service
        self.ipfs_settings = ipfs_settings

    async def execute(self, request: GetIdentificationRequest) -> FlashIdentificationItem:
        """Execute get identification.

        Raises:
            NotFoundError: If no identification has this id
        """
        identification = await self.flash_service.get_identification(request.id)
        return FlashIdentificationItem.from_domain(
            identification, self.ipfs_settings.gateway_url
        )
