"""Get leaderboard use case."""

import logfire
from pydantic import BaseModel, Field

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.domain.model import LeaderboardEntry
from flashcastr.domain.service import LeaderboardService


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    limit: int = Field(default=100, ge=1, le=100)


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    entries: list[LeaderboardEntry]


class GetLeaderboardUseCase(BaseUseCase[GetLeaderboardRequest, GetLeaderboardResponse]):
    """Use case for the top linked users by flash count."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        self.leaderboard_service = leaderboard_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        with logfire.span("get_leaderboard.execute", limit=request.limit):
            entries = await self.leaderboard_service.get_leaderboard(request.limit)
            return GetLeaderboardResponse(entries=entries)
