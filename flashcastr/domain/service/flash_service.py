"""Flash read service: feeds, single flashes and identifications."""

from typing import Optional

import logfire

from flashcastr.domain.error import NotFoundError
from flashcastr.domain.model import AttributedFlash, FlashIdentification, UnifiedFlash
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    FlashIdentificationRepository,
    FlashRepository,
)
from flashcastr.domain.value import Fid, FlashId

from .base import Service


class FlashService(Service):
    """Domain service for reading flashes and their identifications."""

    def __init__(
        self,
        activity_record_repository: ActivityRecordRepository,
        flash_repository: FlashRepository,
        flash_identification_repository: FlashIdentificationRepository,
    ) -> None:
        self.activity_record_repository = activity_record_repository
        self.flash_repository = flash_repository
        self.flash_identification_repository = flash_identification_repository

    async def list_flashes(
        self,
        fid: Optional[Fid] = None,
        username: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> list[AttributedFlash]:
        """Page through attributed flashes, newest first.

        Without filters this is the global feed across every linked user.
        """
        return await self.activity_record_repository.list_flashes(
            fid=fid, username=username, offset=(page - 1) * limit, limit=limit
        )

    async def get_flash(self, flash_id: FlashId) -> UnifiedFlash:
        """A catalog flash with its attribution and identification.

        Raises:
            NotFoundError: If the catalog has no such flash
        """
        with logfire.span("flash_service.get_flash", flash_id=flash_id):
            unified = await self.flash_repository.get_unified(flash_id)
            if unified is None:
                raise NotFoundError("Flash", str(flash_id))
            return unified

    async def list_identifications(
        self,
        ipfs_cid: Optional[str] = None,
        matched_flash_id: Optional[FlashId] = None,
        limit: int = 50,
    ) -> list[FlashIdentification]:
        return await self.flash_identification_repository.find_many(
            ipfs_cid=ipfs_cid, matched_flash_id=matched_flash_id, limit=limit
        )

    async def get_identification(self, identification_id: int) -> FlashIdentification:
        """Raises NotFoundError if no identification has this id."""
        identification = await self.flash_identification_repository.find_by_id(
            identification_id
        )
        if identification is None:
            raise NotFoundError("FlashIdentification", str(identification_id))
        return identification
