"""Flash catalog repository interface (read-only)."""

from abc import ABC, abstractmethod
from typing import Optional

from flashcastr.domain.model.identification import UnifiedFlash
from flashcastr.domain.model.stats import TrendingCity
from flashcastr.domain.value import FlashId


class FlashRepository(ABC):
    """Read access to the raw flash catalog."""

    @abstractmethod
    async def trending_cities(self, since_ms: int, limit: int) -> list[TrendingCity]:
        """Cities with the most flashes captured at or after ``since_ms``.

        Args:
            since_ms: Window start, epoch milliseconds
            limit: Maximum number of cities

        Returns:
            Cities ordered by flash count descending, then name
        """
        pass

    @abstractmethod
    async def get_unified(self, flash_id: FlashId) -> Optional[UnifiedFlash]:
        """A catalog flash joined with its attribution and identification.

        The attribution is the flash's non-deleted activity record; the
        identification is the newest one whose source cid is the flash's
        ``ipfs_cid``.

        Returns:
            The joined view, or None if the catalog has no such flash
        """
        pass
