"""PostgreSQL implementation of the flash catalog repository."""

from typing import Optional

from sqlalchemy import and_, func, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flashcastr.domain.error import StorageError
from flashcastr.domain.model import TrendingCity, UnifiedFlash
from flashcastr.domain.repository import FlashRepository
from flashcastr.domain.value import FlashId
from flashcastr.persistence.mappers import catalog_columns, row_to_unified_flash
from flashcastr.persistence.tables import flash_identifications_table as idents
from flashcastr.persistence.tables import flashcastr_flashes_table as activity
from flashcastr.persistence.tables import flashes_table as catalog


class PostgresFlashRepository(FlashRepository):
    """Read-only queries over the ``flashes`` catalog."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def trending_cities(self, since_ms: int, limit: int) -> list[TrendingCity]:
        flash_count = func.count(catalog.c.flash_id)
        stmt = (
            select(catalog.c.city, flash_count.label("flash_count"))
            .where(catalog.c.timestamp >= since_ms, catalog.c.city.is_not(None))
            .group_by(catalog.c.city)
            .order_by(flash_count.desc(), catalog.c.city)
            .limit(limit)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("Failed to compute trending cities") from e

        return [
            TrendingCity(city=row["city"], flash_count=row["flash_count"])
            for row in result.mappings()
        ]

    async def get_unified(self, flash_id: FlashId) -> Optional[UnifiedFlash]:
        # Several identifications may share a source cid; keep the newest
        latest = (
            select(idents)
            .where(idents.c.source_ipfs_cid == catalog.c.ipfs_cid)
            .order_by(idents.c.created_at.desc(), idents.c.id.desc())
            .limit(1)
            .lateral("latest_identification")
        )
        stmt = (
            select(
                *catalog_columns(),
                activity.c.user_fid.label("activity_user_fid"),
                activity.c.user_username.label("activity_user_username"),
                activity.c.user_pfp_url.label("activity_user_pfp_url"),
                activity.c.cast_hash.label("activity_cast_hash"),
                latest.c.id.label("identification_id"),
                latest.c.source_ipfs_cid.label("identification_source_ipfs_cid"),
                latest.c.matched_flash_id.label("identification_matched_flash_id"),
                latest.c.matched_flash_name.label("identification_matched_flash_name"),
                latest.c.similarity.label("identification_similarity"),
                latest.c.confidence.label("identification_confidence"),
                latest.c.created_at.label("identification_created_at"),
            )
            .select_from(
                catalog.outerjoin(
                    activity,
                    and_(
                        activity.c.flash_id == catalog.c.flash_id,
                        activity.c.deleted.is_(False),
                    ),
                ).outerjoin(latest, true())
            )
            .where(catalog.c.flash_id == flash_id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read flash {flash_id}") from e

        row = result.mappings().first()
        return row_to_unified_flash(row) if row else None
