"""Domain services."""

from .base import Service
from .cache import TtlCache
from .clients import ActivityClient, IdentityClient
from .flash_service import FlashService
from .leaderboard_service import LeaderboardService
from .linked_user_service import LinkedUserService
from .signup_service import SignupService

__all__ = [
    "ActivityClient",
    "FlashService",
    "IdentityClient",
    "LeaderboardService",
    "LinkedUserService",
    "Service",
    "SignupService",
    "TtlCache",
]
