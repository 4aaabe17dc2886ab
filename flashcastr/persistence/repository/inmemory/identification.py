"""In-memory flash identification repository for testing."""

from typing import Optional

from flashcastr.domain.model import Flash, FlashIdentification
from flashcastr.domain.repository import FlashIdentificationRepository
from flashcastr.domain.value import FlashId


class InMemoryFlashIdentificationRepository(FlashIdentificationRepository):
    """In-memory stand-in for the ``flash_identifications`` table.

    ``identifications`` can be shared with ``InMemoryFlashRepository`` and
    ``catalog`` with the other in-memory repositories.
    """

    def __init__(
        self,
        catalog: dict[FlashId, Flash] | None = None,
        identifications: dict[int, FlashIdentification] | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else {}
        self.identifications = identifications if identifications is not None else {}

    def seed(self, identifications: list[FlashIdentification]) -> None:
        for identification in identifications:
            self.identifications[identification.id] = identification

    async def find_many(
        self,
        ipfs_cid: Optional[str] = None,
        matched_flash_id: Optional[FlashId] = None,
        limit: int = 50,
    ) -> list[FlashIdentification]:
        matches = [
            i
            for i in newest_first(self.identifications.values())
            if (ipfs_cid is None or i.source_ipfs_cid == ipfs_cid)
            and (matched_flash_id is None or i.matched_flash_id == matched_flash_id)
        ]
        return [self._with_match(i) for i in matches[:limit]]

    async def find_by_id(self, identification_id: int) -> Optional[FlashIdentification]:
        identification = self.identifications.get(identification_id)
        return self._with_match(identification) if identification else None

    def _with_match(self, identification: FlashIdentification) -> FlashIdentification:
        return identification.model_copy(
            update={"matched_flash": self.catalog.get(identification.matched_flash_id)}
        )


def newest_first(identifications) -> list[FlashIdentification]:
    """Order by ``created_at`` then id, both descending."""
    return sorted(
        identifications,
        key=lambda i: (i.created_at is not None, i.created_at or 0, i.id),
        reverse=True,
    )
