"""Poll signup status use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.application.usecase.common import LinkedUserItem
from flashcastr.domain.service import SignupService


class PollSignupStatusRequest(BaseModel):
    """Poll signup status request."""

    signer_uuid: str
    username: str


class PollSignupStatusResponse(BaseModel):
    """Signup status as seen by the client."""

    status: str  # PENDING_APPROVAL, APPROVED_FINALIZED, ..., UNKNOWN_<STATUS>
    fid: Optional[int] = None
    user: Optional[LinkedUserItem] = None
    message: Optional[str] = None


class PollSignupStatusUseCase(
    BaseUseCase[PollSignupStatusRequest, PollSignupStatusResponse]
):
    """Use case for polling a pending signup.

    Finalizes the signup on approval. Never raises; failures come back as
    ``ERROR_*`` statuses.
    """

    def __init__(self, signup_service: SignupService) -> None:
        self.signup_service = signup_service

    async def execute(self, request: PollSignupStatusRequest) -> PollSignupStatusResponse:
        with logfire.span("poll_signup_status.execute", signer_uuid=request.signer_uuid):
            outcome = await self.signup_service.poll_status(
                request.signer_uuid, request.username
            )

            logfire.info("Signup polled", status=outcome.label, fid=outcome.fid)

            return PollSignupStatusResponse(
                status=outcome.label,
                fid=outcome.fid,
                user=LinkedUserItem.from_domain(outcome.user) if outcome.user else None,
                message=outcome.message,
            )
