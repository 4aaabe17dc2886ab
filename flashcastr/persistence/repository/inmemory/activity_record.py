"""In-memory activity record repository for testing."""

from typing import Optional

from flashcastr.domain.error import StorageError
from flashcastr.domain.model import (
    ActivityRecord,
    AttributedFlash,
    Flash,
    LeaderboardEntry,
)
from flashcastr.domain.repository import ActivityRecordRepository
from flashcastr.domain.value import Fid, FlashId


class InMemoryActivityRecordRepository(ActivityRecordRepository):
    """In-memory implementation of ActivityRecordRepository for testing.

    ``catalog`` plays the part of the ``flashes`` table for joins; ``records``
    can be shared with ``InMemoryFlashRepository``. Set ``fail_upsert`` to
    make ``bulk_upsert`` raise ``StorageError``.
    """

    def __init__(
        self,
        catalog: dict[FlashId, Flash] | None = None,
        records: dict[FlashId, ActivityRecord] | None = None,
    ) -> None:
        self._records = records if records is not None else {}
        self.catalog = catalog if catalog is not None else {}
        self.fail_upsert = False
        self.upsert_calls = 0

    async def bulk_upsert(self, records: list[ActivityRecord]) -> int:
        self.upsert_calls += 1
        if self.fail_upsert:
            raise StorageError("Failed to upsert activity records")

        for record in records:
            existing = self._records.get(record.flash_id)
            cast_hash = existing.cast_hash if existing else record.cast_hash
            self._records[record.flash_id] = record.model_copy(
                update={"deleted": False, "cast_hash": cast_hash}
            )
        return len(records)

    async def soft_delete_by_fid(self, fid: Fid) -> int:
        marked = 0
        for flash_id, record in self._records.items():
            if record.user_fid == fid and not record.deleted:
                self._records[flash_id] = record.model_copy(update={"deleted": True})
                marked += 1
        return marked

    async def list_flashes(
        self,
        fid: Optional[Fid] = None,
        username: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[AttributedFlash]:
        attributed = [
            AttributedFlash(record=r, flash=self.catalog.get(r.flash_id))
            for r in self._records.values()
            if not r.deleted
            and (fid is None or r.user_fid == fid)
            and (username is None or r.user_username == username)
        ]
        attributed.sort(
            key=lambda a: (
                a.flash is not None and a.flash.timestamp is not None,
                a.flash.timestamp if a.flash and a.flash.timestamp else 0,
                a.record.flash_id,
            ),
            reverse=True,
        )
        return attributed[offset : offset + limit]

    async def count_by_fid(self, fid: Fid) -> int:
        return len(self._active(fid))

    async def distinct_cities_by_fid(self, fid: Fid) -> list[str]:
        return sorted({city for city in self._cities(self._active(fid)) if city})

    async def leaderboard(self, limit: int) -> list[LeaderboardEntry]:
        by_fid: dict[Fid, list[ActivityRecord]] = {}
        for record in self._records.values():
            if not record.deleted:
                by_fid.setdefault(record.user_fid, []).append(record)

        entries = [
            LeaderboardEntry(
                fid=fid,
                username=max(r.user_username for r in owned),
                pfp_url=max((r.user_pfp_url for r in owned if r.user_pfp_url), default=None),
                flash_count=len(owned),
                city_count=len({c for c in self._cities(owned) if c}),
            )
            for fid, owned in by_fid.items()
        ]
        entries.sort(key=lambda e: (-e.flash_count, e.fid))
        return entries[:limit]

    def all(self) -> list[ActivityRecord]:
        """Every stored record, deleted ones included."""
        return list(self._records.values())

    def _active(self, fid: Fid) -> list[ActivityRecord]:
        return [r for r in self._records.values() if r.user_fid == fid and not r.deleted]

    def _cities(self, records: list[ActivityRecord]) -> list[str | None]:
        return [
            self.catalog[r.flash_id].city for r in records if r.flash_id in self.catalog
        ]
