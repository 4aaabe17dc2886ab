"""Flash identification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from flashcastr.application.usecase.common import FlashIdentificationItem
from flashcastr.application.usecase.identification import (
    GetIdentificationRequest,
    GetIdentificationUseCase,
    ListIdentificationsRequest,
    ListIdentificationsResponse,
    ListIdentificationsUseCase,
)
from flashcastr.domain.error import DomainError
from flashcastr.interface.error import to_http_exception

router = APIRouter(
    prefix="/flash-identifications",
    tags=["identifications"],
    route_class=DishkaRoute,
)


@router.get("", response_model=ListIdentificationsResponse)
async def list_identifications(
    use_case: FromDishka[ListIdentificationsUseCase],
    ipfs_cid: str | None = None,
    matched_flash_id: int | None = None,
    limit: int = Query(default=50, ge=1, le=100),
) -> ListIdentificationsResponse:
    """Identifications, newest first.

    Example:
        GET /flash-identifications?matched_flash_id=12345
    """
    return await use_case.execute(
        ListIdentificationsRequest(
            ipfs_cid=ipfs_cid, matched_flash_id=matched_flash_id, limit=limit
        )
    )


@router.get("/{identification_id}", response_model=FlashIdentificationItem)
async def get_identification(
    identification_id: int, use_case: FromDishka[GetIdentificationUseCase]
) -> FlashIdentificationItem:
    try:
        return await use_case.execute(GetIdentificationRequest(id=identification_id))
    except DomainError as e:
        raise to_http_exception(e)
