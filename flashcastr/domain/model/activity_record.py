"""Activity record entity: attribution of a flash to a linked user."""

from typing import Optional

from flashcastr.domain.model.common import DomainModel
from flashcastr.domain.model.flash import Flash
from flashcastr.domain.value import Fid, FlashId


class ActivityRecord(DomainModel):
    """A flash attributed to a linked user.

    ``user_username`` and ``user_pfp_url`` are copied at import time and
    are allowed to drift from the user's current profile.
    """

    flash_id: FlashId
    user_fid: Fid
    user_username: str
    user_pfp_url: Optional[str] = None
    cast_hash: Optional[str] = None  # Set once the flash is published as a cast
    deleted: bool = False


class AttributedFlash(DomainModel):
    """Activity record joined with the flash it points at (if catalogued)."""

    record: ActivityRecord
    flash: Optional[Flash] = None
