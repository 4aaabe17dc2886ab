"""Leaderboard and trending aggregates."""

import time

import logfire

from flashcastr.config import CacheSettings
from flashcastr.domain.model import LeaderboardEntry, TrendingCity
from flashcastr.domain.repository import ActivityRecordRepository, FlashRepository

from .base import Service
from .cache import TtlCache

LEADERBOARD_CACHE = "leaderboard"
TRENDING_CACHE = "trending_cities"


class LeaderboardService(Service):
    """Cached aggregate views over attributed and raw flashes."""

    def __init__(
        self,
        activity_record_repository: ActivityRecordRepository,
        flash_repository: FlashRepository,
        cache: TtlCache,
        cache_settings: CacheSettings,
    ) -> None:
        self.activity_record_repository = activity_record_repository
        self.flash_repository = flash_repository
        self.cache = cache
        self.cache_settings = cache_settings

    async def get_leaderboard(self, limit: int = 100) -> list[LeaderboardEntry]:
        """Top linked users by attributed flash count.

        The full board is cached under one name; ``limit`` only slices it.
        """

        async def load() -> list[LeaderboardEntry]:
            with logfire.span("leaderboard_service.load_leaderboard"):
                return await self.activity_record_repository.leaderboard(limit=100)

        board = await self.cache.get_or_load(
            LEADERBOARD_CACHE, self.cache_settings.leaderboard_ttl, load
        )
        return board[:limit]

    async def get_trending_cities(
        self, hours: int = 6, limit: int = 10
    ) -> list[TrendingCity]:
        """Cities with the most flashes over the last ``hours`` hours."""

        async def load() -> list[TrendingCity]:
            since_ms = int((time.time() - hours * 3600) * 1000)
            with logfire.span("leaderboard_service.load_trending", hours=hours):
                return await self.flash_repository.trending_cities(
                    since_ms=since_ms, limit=limit
                )

        return await self.cache.get_or_load(
            f"{TRENDING_CACHE}:{hours}:{limit}", self.cache_settings.trending_ttl, load
        )
