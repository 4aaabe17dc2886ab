"""Mappers between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand
rather than through an ORM mapping.
"""

from typing import Any, Mapping, Optional

from flashcastr.domain.model import (
    ActivityRecord,
    AttributedFlash,
    Flash,
    FlashIdentification,
    LinkedUser,
    UnifiedFlash,
)
from flashcastr.domain.value import Fid, FlashId
from flashcastr.persistence.tables import flashes_table as catalog


def row_to_linked_user(row: Mapping[str, Any]) -> LinkedUser:
    return LinkedUser(
        fid=Fid(row["fid"]),
        username=row["username"],
        signer_uuid=row["signer_uuid"],
        auto_cast=row["auto_cast"],
        deleted=row["deleted"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def linked_user_to_dict(user: LinkedUser) -> dict[str, Any]:
    """Columns written on upsert; timestamps are left to the database."""
    return user.model_dump(exclude={"created_at", "updated_at"})


def activity_record_to_dict(record: ActivityRecord) -> dict[str, Any]:
    return record.model_dump()


def row_to_activity_record(row: Mapping[str, Any]) -> ActivityRecord:
    return ActivityRecord(
        flash_id=FlashId(row["flash_id"]),
        user_fid=Fid(row["user_fid"]),
        user_username=row["user_username"],
        user_pfp_url=row.get("user_pfp_url"),
        cast_hash=row.get("cast_hash"),
        deleted=row["deleted"],
    )


def catalog_columns() -> list[Any]:
    """Catalog columns labelled the way ``row_to_catalog_flash`` reads them."""
    return [
        catalog.c.flash_id.label("flash_catalog_id"),
        catalog.c.city.label("flash_city"),
        catalog.c.player.label("flash_player"),
        catalog.c.img.label("flash_img"),
        catalog.c.ipfs_cid.label("flash_ipfs_cid"),
        catalog.c.text.label("flash_text"),
        catalog.c.timestamp.label("flash_timestamp"),
    ]


def row_to_catalog_flash(row: Mapping[str, Any]) -> Optional[Flash]:
    """Map catalog columns labelled ``flash_*`` from a LEFT JOIN.

    Returns None when the join found no catalog row.
    """
    if row.get("flash_catalog_id") is None:
        return None
    return Flash(
        flash_id=FlashId(row["flash_catalog_id"]),
        city=row.get("flash_city"),
        player=row.get("flash_player"),
        img=row.get("flash_img"),
        ipfs_cid=row.get("flash_ipfs_cid"),
        text=row.get("flash_text"),
        timestamp=row.get("flash_timestamp"),
    )


def row_to_attributed_flash(row: Mapping[str, Any]) -> AttributedFlash:
    """Map an activity row LEFT JOINed with the catalog."""
    return AttributedFlash(
        record=row_to_activity_record(row), flash=row_to_catalog_flash(row)
    )


def row_to_flash_identification(row: Mapping[str, Any]) -> FlashIdentification:
    """Map an identification row, LEFT JOINed with its matched flash if selected."""
    return FlashIdentification(
        id=row["id"],
        source_ipfs_cid=row["source_ipfs_cid"],
        matched_flash_id=FlashId(row["matched_flash_id"]),
        matched_flash_name=row.get("matched_flash_name"),
        similarity=row["similarity"],
        confidence=row["confidence"],
        created_at=row.get("created_at"),
        matched_flash=row_to_catalog_flash(row),
    )


def row_to_unified_flash(row: Mapping[str, Any]) -> UnifiedFlash:
    """Map the catalog row with ``activity_*`` and ``identification_*`` columns."""
    attribution = None
    if row.get("activity_user_fid") is not None:
        attribution = ActivityRecord(
            flash_id=FlashId(row["flash_catalog_id"]),
            user_fid=Fid(row["activity_user_fid"]),
            user_username=row["activity_user_username"],
            user_pfp_url=row.get("activity_user_pfp_url"),
            cast_hash=row.get("activity_cast_hash"),
        )

    identification = None
    if row.get("identification_id") is not None:
        identification = FlashIdentification(
            id=row["identification_id"],
            source_ipfs_cid=row["identification_source_ipfs_cid"],
            matched_flash_id=FlashId(row["identification_matched_flash_id"]),
            matched_flash_name=row.get("identification_matched_flash_name"),
            similarity=row["identification_similarity"],
            confidence=row["identification_confidence"],
            created_at=row.get("identification_created_at"),
        )

    return UnifiedFlash(
        flash=row_to_catalog_flash(row),
        attribution=attribution,
        identification=identification,
    )
