"""Image identifications: photos matched against catalogued flashes."""

from datetime import datetime
from typing import Optional

from flashcastr.domain.model.activity_record import ActivityRecord
from flashcastr.domain.model.common import DomainModel
from flashcastr.domain.model.flash import Flash
from flashcastr.domain.value import FlashId


class FlashIdentification(DomainModel):
    """A pinned image matched to a known flash by the identification pipeline.

    Rows are written by the pipeline; this service only reads them.
    """

    id: int
    source_ipfs_cid: str
    matched_flash_id: FlashId
    matched_flash_name: Optional[str] = None
    similarity: float
    confidence: float
    created_at: Optional[datetime] = None
    matched_flash: Optional[Flash] = None  # Set when the catalog has the match


class UnifiedFlash(DomainModel):
    """A catalog flash with its attribution and latest identification."""

    flash: Flash
    attribution: Optional[ActivityRecord] = None  # Non-deleted records only
    identification: Optional[FlashIdentification] = None
