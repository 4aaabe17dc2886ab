"""Aggregate stats routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from flashcastr.application.usecase.stats import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetTrendingCitiesRequest,
    GetTrendingCitiesResponse,
    GetTrendingCitiesUseCase,
)

router = APIRouter(prefix="/stats", tags=["stats"], route_class=DishkaRoute)


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    use_case: FromDishka[GetLeaderboardUseCase],
    limit: int = Query(default=100, ge=1, le=100),
) -> GetLeaderboardResponse:
    """Top linked users by flash count (cached)."""
    return await use_case.execute(GetLeaderboardRequest(limit=limit))


@router.get("/trending-cities", response_model=GetTrendingCitiesResponse)
async def get_trending_cities(
    use_case: FromDishka[GetTrendingCitiesUseCase],
    hours: int = Query(default=6, ge=1, le=168),
    limit: int = Query(default=10, ge=1, le=100),
) -> GetTrendingCitiesResponse:
    """Cities with the most flashes in the last ``hours`` hours (cached)."""
    return await use_case.execute(GetTrendingCitiesRequest(hours=hours, limit=limit))
