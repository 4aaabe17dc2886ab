"""Flash identification repository interface (read-only)."""

from abc import ABC, abstractmethod
from typing import Optional

from flashcastr.domain.model.identification import FlashIdentification
from flashcastr.domain.value import FlashId


class FlashIdentificationRepository(ABC):
    """Read access to identifications written by the matching pipeline.

    Returned identifications carry ``matched_flash`` when the catalog
    holds the matched flash.
    """

    @abstractmethod
    async def find_many(
        self,
        ipfs_cid: Optional[str] = None,
        matched_flash_id: Optional[FlashId] = None,
        limit: int = 50,
    ) -> list[FlashIdentification]:
        """List identifications, newest first, optionally filtered."""
        pass

    @abstractmethod
    async def find_by_id(self, identification_id: int) -> Optional[FlashIdentification]:
        pass
