"""Signup routes.

A signup is two steps: ``POST /signup`` creates a signer and returns the
approval URL, then the client polls ``GET /signup/status`` until the status
is final.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException

from flashcastr.application.usecase.signup import (
    InitiateSignupRequest,
    InitiateSignupResponse,
    InitiateSignupUseCase,
    PollSignupStatusRequest,
    PollSignupStatusResponse,
    PollSignupStatusUseCase,
)
from flashcastr.domain.error import DomainError
from flashcastr.interface.error import to_http_exception
from flashcastr.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/signup", tags=["signup"], route_class=DishkaRoute)


@router.post("", response_model=InitiateSignupResponse)
async def initiate_signup(
    request: InitiateSignupRequest,
    use_case: FromDishka[InitiateSignupUseCase],
) -> InitiateSignupResponse:
    """Start a signup for a player name.

    Raises:
        HTTPException: 400 on a blank or over-long username, 502 if Neynar fails
    """
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Signup initiation failed", error=str(e))
        raise to_http_exception(e)


@router.get("/status", response_model=PollSignupStatusResponse)
async def poll_signup_status(
    signer_uuid: str,
    username: str,
    use_case: FromDishka[PollSignupStatusUseCase],
) -> PollSignupStatusResponse:
    """Poll a pending signup, finalizing it once the signer is approved.

    Always 200: failures are reported in ``status``.
    """
    if not signer_uuid.strip() or not username.strip():
        raise HTTPException(
            status_code=400, detail="signer_uuid and username are required"
        )

    response = await use_case.execute(
        PollSignupStatusRequest(signer_uuid=signer_uuid, username=username)
    )
    logger.info(f"Signup status for {signer_uuid}: {response.status}")
    return response
