"""Signup use cases."""

from .initiate_signup import (
    InitiateSignupRequest,
    InitiateSignupResponse,
    InitiateSignupUseCase,
)
from .poll_signup_status import (
    PollSignupStatusRequest,
    PollSignupStatusResponse,
    PollSignupStatusUseCase,
)

__all__ = [
    "InitiateSignupRequest",
    "InitiateSignupResponse",
    "InitiateSignupUseCase",
    "PollSignupStatusRequest",
    "PollSignupStatusResponse",
    "PollSignupStatusUseCase",
]
