"""Linked user entity.

A Farcaster account that has approved a Flashcastr signer and is bound to
an in-game player name.
"""

from datetime import datetime
from typing import Optional

from flashcastr.domain.model.common import DomainModel
from flashcastr.domain.value import Fid


class LinkedUser(DomainModel):
    """Farcaster identity linked to a player name.

    ``signer_uuid`` always holds the encrypted credential, never the raw
    signer identifier.
    """

    fid: Fid
    username: str  # Player name used to match activity, not the Farcaster handle
    signer_uuid: str
    auto_cast: bool = True
    deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
