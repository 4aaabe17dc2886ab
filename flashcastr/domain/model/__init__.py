"""Domain model entities for Flashcastr."""

from flashcastr.domain.model.activity_record import ActivityRecord, AttributedFlash
from flashcastr.domain.model.flash import Flash, FlashPage
from flashcastr.domain.model.identification import FlashIdentification, UnifiedFlash
from flashcastr.domain.model.identity import Signer, SocialProfile
from flashcastr.domain.model.linked_user import LinkedUser
from flashcastr.domain.model.signup import SignupOutcome
from flashcastr.domain.model.stats import LeaderboardEntry, TrendingCity

__all__ = [
    "ActivityRecord",
    "AttributedFlash",
    "Flash",
    "FlashIdentification",
    "FlashPage",
    "LeaderboardEntry",
    "LinkedUser",
    "Signer",
    "SignupOutcome",
    "SocialProfile",
    "TrendingCity",
    "UnifiedFlash",
]
