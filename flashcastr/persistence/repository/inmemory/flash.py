"""In-memory flash catalog for testing."""

from collections import Counter
from typing import Optional

from flashcastr.domain.model import (
    ActivityRecord,
    Flash,
    FlashIdentification,
    TrendingCity,
    UnifiedFlash,
)
from flashcastr.domain.repository import FlashRepository
from flashcastr.domain.value import FlashId

from .identification import newest_first


class InMemoryFlashRepository(FlashRepository):
    """In-memory stand-in for the ``flashes`` table.

    ``catalog``, ``records`` and ``identifications`` can be shared with the
    other in-memory repositories so that seeded rows show up in every view.
    """

    def __init__(
        self,
        catalog: dict[FlashId, Flash] | None = None,
        records: dict[FlashId, ActivityRecord] | None = None,
        identifications: dict[int, FlashIdentification] | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else {}
        self.records = records if records is not None else {}
        self.identifications = identifications if identifications is not None else {}

    def seed(self, flashes: list[Flash]) -> None:
        for flash in flashes:
            self.catalog[flash.flash_id] = flash

    async def trending_cities(self, since_ms: int, limit: int) -> list[TrendingCity]:
        counts = Counter(
            f.city
            for f in self.catalog.values()
            if f.city and f.timestamp is not None and f.timestamp >= since_ms
        )
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [TrendingCity(city=city, flash_count=n) for city, n in ranked[:limit]]

    async def get_unified(self, flash_id: FlashId) -> Optional[UnifiedFlash]:
        flash = self.catalog.get(flash_id)
        if flash is None:
            return None

        record = self.records.get(flash_id)
        identification = None
        if flash.ipfs_cid:
            identification = next(
                (
                    i
                    for i in newest_first(self.identifications.values())
                    if i.source_ipfs_cid == flash.ipfs_cid
                ),
                None,
            )

        return UnifiedFlash(
            flash=flash,
            attribution=record if record and not record.deleted else None,
            identification=identification,
        )
