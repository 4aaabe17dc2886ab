"""Get trending cities use case."""

import logfire
from pydantic import BaseModel, Field

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.domain.model import TrendingCity
from flashcastr.domain.service import LeaderboardService


class GetTrendingCitiesRequest(BaseModel):
    """Get trending cities request."""

    hours: int = Field(default=6, ge=1, le=168)
    limit: int = Field(default=10, ge=1, le=100)


class GetTrendingCitiesResponse(BaseModel):
    """Get trending cities response."""

    cities: list[TrendingCity]


class GetTrendingCitiesUseCase(
    BaseUseCase[GetTrendingCitiesRequest, GetTrendingCitiesResponse]
):
    """Use case for cities with the most recent flashes."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        self.leaderboard_service = leaderboard_service

    async def execute(
        self, request: GetTrendingCitiesRequest
    ) -> GetTrendingCitiesResponse:
        with logfire.span("get_trending_cities.execute", hours=request.hours):
            cities = await self.leaderboard_service.get_trending_cities(
                hours=request.hours, limit=request.limit
            )
            return GetTrendingCitiesResponse(cities=cities)
