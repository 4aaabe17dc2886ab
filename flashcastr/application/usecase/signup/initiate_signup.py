"""Initiate signup use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from flashcastr.application.usecase.base import BaseUseCase
from flashcastr.domain.service import SignupService


class InitiateSignupRequest(BaseModel):
    """Initiate signup request."""

    username: str


class InitiateSignupResponse(BaseModel):
    """Signer awaiting approval in the user's Farcaster app."""

    signer_uuid: str
    public_key: str
    status: str
    signer_approval_url: Optional[str] = None
    fid: Optional[int] = None


class InitiateSignupUseCase(BaseUseCase[InitiateSignupRequest, InitiateSignupResponse]):
    """Use case for starting a signup."""

    def __init__(self, signup_service: SignupService) -> None:
        """Initialize initiate signup use case.

        Args:
            signup_service: Signup domain service
        """
        self.signup_service = signup_service

    async def execute(self, request: InitiateSignupRequest) -> InitiateSignupResponse:
        """Create a sponsored signer for the given player name.

        Raises:
            InvalidInputError: If the username is blank or too long
            UpstreamError: If the identity service fails
        """
        with logfire.span("initiate_signup.execute"):
            signer = await self.signup_service.initiate(request.username)
            return InitiateSignupResponse(
                signer_uuid=signer.signer_uuid,
                public_key=signer.public_key,
                status=signer.status,
                signer_approval_url=signer.signer_approval_url,
                fid=signer.fid,
            )
