"""Aggregate stats use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)
from .get_trending_cities import (
    GetTrendingCitiesRequest,
    GetTrendingCitiesResponse,
    GetTrendingCitiesUseCase,
)

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetTrendingCitiesRequest",
    "GetTrendingCitiesResponse",
    "GetTrendingCitiesUseCase",
]
