"""List flash identifications use case."""

from typing import Optional

from pydantic import BaseModel, Field

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import FlashIdentificationItem
from flashcastr.config import IpfsSettings
from flashcastr.domain.service import FlashService
from flashcastr.domain.value import FlashId


class ListIdentificationsRequest(BaseModel):
    """List identifications request."""

    ipfs_cid: Optional[str] = None
    matched_flash_id: Optional[int] = None
    limit: int = Field(default=50, ge=1, le=100)


class ListIdentificationsResponse(BaseModel):
    """List identifications response."""

    identifications: list[FlashIdentificationItem]


class ListIdentificationsUseCase(
    BaseUseCase[ListIdentificationsRequest, ListIdentificationsResponse]
):
    """Use case for listing identifications, newest first."""

    def __init__(self, flash_service: FlashService, ipfs_settings: IpfsSettings) -> None:
        self.flash_service = flash_service
        self.ipfs_settings = ipfs_settings

    async def execute(
        self, request: ListIdentificationsRequest
    ) -> ListIdentificationsResponse:
        matched = request.matched_flash_id
        identifications = await self.flash_service.list_identifications(
            ipfs_cid=request.ipfs_cid,
            matched_flash_id=FlashId(matched) if matched is not None else None,
            limit=request.limit,
        )
        gateway = self.ipfs_settings.gateway_url
        return ListIdentificationsResponse(
            identifications=[
                FlashIdentificationItem.from_domain(i, gateway) for i in identifications
            ]
        )
