"""Activity record repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from flashcastr.domain.model.activity_record import ActivityRecord, AttributedFlash
from flashcastr.domain.model.stats import LeaderboardEntry
from flashcastr.domain.value import Fid


class ActivityRecordRepository(ABC):
    """Repository for ActivityRecord entities.

    Implementations raise ``StorageError`` when the store fails.
    """

    @abstractmethod
    async def bulk_upsert(self, records: list[ActivityRecord]) -> int:
        """Insert records, refreshing any that already exist.

        Conflicts are keyed on ``flash_id``. On conflict the soft-delete flag
        is cleared and owner, username and pfp are refreshed; ``cast_hash``
        is left untouched.

        Returns:
            Number of rows written
        """
        pass

    @abstractmethod
    async def soft_delete_by_fid(self, fid: Fid) -> int:
        """Mark every record owned by ``fid`` deleted.

        Returns:
            Number of rows marked
        """
        pass

    @abstractmethod
    async def list_flashes(
        self,
        fid: Optional[Fid] = None,
        username: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[AttributedFlash]:
        """List non-deleted records, newest flash first.

        With neither filter this is the global feed. ``username`` matches
        the attribution name copied onto each record.
        """
        pass

    @abstractmethod
    async def count_by_fid(self, fid: Fid) -> int:
        """Count a user's non-deleted records."""
        pass

    @abstractmethod
    async def distinct_cities_by_fid(self, fid: Fid) -> list[str]:
        """Distinct cities across a user's non-deleted records, sorted."""
        pass

    @abstractmethod
    async def leaderboard(self, limit: int) -> list[LeaderboardEntry]:
        """Rank non-deleted users by non-deleted record count, descending."""
        pass
