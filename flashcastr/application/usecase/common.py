"""Response items shared by several use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from flashcastr.domain.model import (
    AttributedFlash,
    Flash,
    FlashIdentification,
    LinkedUser,
    UnifiedFlash,
)
from flashcastr.util.ipfs import gateway_url


class LinkedUserItem(BaseModel):
    """Public view of a linked user. The encrypted signer is never exposed."""

    fid: int
    username: str
    auto_cast: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: LinkedUser) -> "LinkedUserItem":
        return cls(
            fid=user.fid,
            username=user.username,
            auto_cast=user.auto_cast,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class FlashItem(BaseModel):
    """An attributed flash with catalog details when known."""

    flash_id: int
    user_fid: int
    user_username: str
    user_pfp_url: Optional[str] = None
    cast_hash: Optional[str] = None
    city: Optional[str] = None
    player: Optional[str] = None
    img: Optional[str] = None
    ipfs_cid: Optional[str] = None
    ipfs_url: Optional[str] = None
    text: Optional[str] = None
    timestamp: Optional[int] = None

    @classmethod
    def from_domain(
        cls, attributed: AttributedFlash, ipfs_gateway: str
    ) -> "FlashItem":
        record, flash = attributed.record, attributed.flash
        ipfs_cid = flash.ipfs_cid if flash else None
        return cls(
            flash_id=record.flash_id,
            user_fid=record.user_fid,
            user_username=record.user_username,
            user_pfp_url=record.user_pfp_url,
            cast_hash=record.cast_hash,
            city=flash.city if flash else None,
            player=flash.player if flash else None,
            img=flash.img if flash else None,
            ipfs_cid=ipfs_cid,
            ipfs_url=gateway_url(ipfs_cid, ipfs_gateway),
            text=flash.text if flash else None,
            timestamp=flash.timestamp if flash else None,
        )


class CatalogFlashItem(BaseModel):
    """A flash as recorded in the catalog."""

    flash_id: int
    city: Optional[str] = None
    player: Optional[str] = None
    img: Optional[str] = None
    ipfs_cid: Optional[str] = None
    ipfs_url: Optional[str] = None
    text: Optional[str] = None
    timestamp: Optional[int] = None

    @classmethod
    def from_domain(cls, flash: Flash, ipfs_gateway: str) -> "CatalogFlashItem":
        return cls(
            flash_id=flash.flash_id,
            city=flash.city,
            player=flash.player,
            img=flash.img,
            ipfs_cid=flash.ipfs_cid,
            ipfs_url=gateway_url(flash.ipfs_cid, ipfs_gateway),
            text=flash.text,
            timestamp=flash.timestamp,
        )


class FlashIdentificationItem(BaseModel):
    """An image matched to a known flash."""

    id: int
    source_ipfs_cid: str
    source_ipfs_url: Optional[str] = None
    matched_flash_id: int
    matched_flash_name: Optional[str] = None
    similarity: float
    confidence: float
    created_at: Optional[datetime] = None
    matched_flash: Optional[CatalogFlashItem] = None

    @classmethod
    def from_domain(
        cls, identification: FlashIdentification, ipfs_gateway: str
    ) -> "FlashIdentificationItem":
        matched = identification.matched_flash
        return cls(
            id=identification.id,
            source_ipfs_cid=identification.source_ipfs_cid,
            source_ipfs_url=gateway_url(identification.source_ipfs_cid, ipfs_gateway),
            matched_flash_id=identification.matched_flash_id,
            matched_flash_name=identification.matched_flash_name,
            similarity=identification.similarity,
            confidence=identification.confidence,
            created_at=identification.created_at,
            matched_flash=(
                CatalogFlashItem.from_domain(matched, ipfs_gateway) if matched else None
            ),
        )


class FarcasterUserItem(BaseModel):
    """The linked user a flash is attributed to."""

    fid: int
    username: str
    pfp_url: Optional[str] = None
    cast_hash: Optional[str] = None


class UnifiedFlashItem(CatalogFlashItem):
    """A catalog flash with its attribution and identification, if any."""

    farcaster_user: Optional[FarcasterUserItem] = None
    identification: Optional[FlashIdentificationItem] = None

    @classmethod
    def from_unified(
        cls, unified: UnifiedFlash, ipfs_gateway: str
    ) -> "UnifiedFlashItem":
        attribution, identification = unified.attribution, unified.identification
        catalog = CatalogFlashItem.from_domain(unified.flash, ipfs_gateway)
        return cls(
            **catalog.model_dump(),
            farcaster_user=(
                FarcasterUserItem(
                    fid=attribution.user_fid,
                    username=attribution.user_username,
                    pfp_url=attribution.user_pfp_url,
                    cast_hash=attribution.cast_hash,
                )
                if attribution
                else None
            ),
            identification=(
                FlashIdentificationItem.from_domain(identification, ipfs_gateway)
                if identification
                else None
            ),
        )
