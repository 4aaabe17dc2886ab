"""Domain value objects for Flashcastr.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from flashcastr.domain.value.common import RootValueObject

# Characters that carry meaning in the activity service's player filter
_PATTERN_METACHARACTERS = re.compile(r"[.*+?^${}()|[\]\\]")


class SignerStatus(str, Enum):
    """Signer statuses reported by the identity service.

    The service may report statuses outside this set; callers keep the raw
    string and compare against these members.
    """

    GENERATED = "generated"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REVOKED = "revoked"


class SignupStatus(str, Enum):
    """Caller-observable result of polling a signup."""

    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED_FINALIZED = "APPROVED_FINALIZED"
    REVOKED = "REVOKED"
    ERROR_FINALIZATION = "ERROR_FINALIZATION"
    ERROR_LOOKUP = "ERROR_LOOKUP"
    UNKNOWN = "UNKNOWN"


class PlayerName(RootValueObject[str]):
    """In-game player name, as typed by the user at signup.

    Not guaranteed to match the Farcaster username.
    """

    @field_validator("root")
    @classmethod
    def validate_player_name(cls, v: str) -> str:
        """Strip surrounding whitespace and enforce length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Player name must be 1-255 characters")
        return v

    def as_filter_literal(self) -> str:
        """Escape pattern metacharacters so the name matches only itself."""
        return _PATTERN_METACHARACTERS.sub(r"\\\g<0>", self.root)
