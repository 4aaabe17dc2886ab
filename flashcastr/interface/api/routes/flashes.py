"""Flash routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from flashcastr.application.usecase.common import UnifiedFlashItem
from flashcastr.application.usecase.flash import (
    GetFlashesRequest,
    GetFlashesResponse,
    GetFlashesSummaryRequest,
    GetFlashesSummaryResponse,
    GetFlashesSummaryUseCase,
    GetFlashesUseCase,
    GetFlashRequest,
    GetFlashUseCase,
)
from flashcastr.domain.error import DomainError
from flashcastr.interface.error import to_http_exception

router = APIRouter(prefix="/flashes", tags=["flashes"], route_class=DishkaRoute)


@router.get("", response_model=GetFlashesResponse)
async def get_flashes(
    use_case: FromDishka[GetFlashesUseCase],
    fid: int | None = None,
    username: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> GetFlashesResponse:
    """Attributed flashes, newest first.

    Filter by ``fid`` and/or ``username``; with neither, the global feed.

    Example:
        GET /flashes?username=invader&page=1&limit=20
    """
    return await use_case.execute(
        GetFlashesRequest(fid=fid, username=username, page=page, limit=limit)
    )


@router.get("/summary", response_model=GetFlashesSummaryResponse)
async def get_flashes_summary(
    fid: int,
    use_case: FromDishka[GetFlashesSummaryUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> GetFlashesSummaryResponse:
    """A page of flashes plus the user's flash count and cities."""
    return await use_case.execute(
        GetFlashesSummaryRequest(fid=fid, page=page, limit=limit)
    )


# Declared after /summary so that path is not read as a flash id
@router.get("/{flash_id}", response_model=UnifiedFlashItem)
async def get_flash(
    flash_id: int, use_case: FromDishka[GetFlashUseCase]
) -> UnifiedFlashItem:
    """A catalog flash with its linked user and identification, if any."""
    try:
        return await use_case.execute(GetFlashRequest(flash_id=flash_id))
    except DomainError as e:
        raise to_http_exception(e)
