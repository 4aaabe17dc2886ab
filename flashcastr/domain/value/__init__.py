"""Domain value objects for Flashcastr."""

from flashcastr.domain.value.identifiers import Fid, FlashId, SignerUuid
from flashcastr.domain.value.types import PlayerName, SignerStatus, SignupStatus

__all__ = [
    # Identifiers
    "Fid",
    "FlashId",
    "SignerUuid",
    # Types
    "PlayerName",
    "SignerStatus",
    "SignupStatus",
]
