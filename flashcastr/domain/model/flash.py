"""Raw activity items ("flashes") from the activity service."""

from typing import Optional

from flashcastr.domain.value import FlashId
from flashcastr.domain.value.common import ValueObject


class Flash(ValueObject):
    """A single geolocated capture, read-only to this service."""

    flash_id: FlashId
    city: Optional[str] = None
    player: Optional[str] = None
    img: Optional[str] = None
    ipfs_cid: Optional[str] = None
    text: Optional[str] = None
    timestamp: Optional[int] = None  # Epoch milliseconds


class FlashPage(ValueObject):
    """One page of flashes from the activity service."""

    items: list[Flash]
    has_next: bool
