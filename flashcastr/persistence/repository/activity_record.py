"""PostgreSQL implementation of ActivityRecord repository."""

from typing import Optional

import logfire
from sqlalchemy import distinct, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flashcastr.domain.error import StorageError
from flashcastr.domain.model import ActivityRecord, AttributedFlash, LeaderboardEntry
from flashcastr.domain.repository import ActivityRecordRepository
from flashcastr.domain.value import Fid
from flashcastr.persistence.mappers import (
    activity_record_to_dict,
    catalog_columns,
    row_to_attributed_flash,
)
from flashcastr.persistence.tables import flashcastr_flashes_table as activity
from flashcastr.persistence.tables import flashes_table as catalog

# asyncpg caps a statement at 32767 bind parameters (six columns per row)
UPSERT_CHUNK_SIZE = 1000


class PostgresActivityRecordRepository(ActivityRecordRepository):
    """PostgreSQL implementation of ActivityRecordRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def bulk_upsert(self, records: list[ActivityRecord]) -> int:
        """Upsert records in chunks inside one savepoint.

        Either every chunk lands or none do.
        """
        if not records:
            return 0

        written = 0
        try:
            async with self.session.begin_nested():
                for start in range(0, len(records), UPSERT_CHUNK_SIZE):
                    chunk = records[start : start + UPSERT_CHUNK_SIZE]
                    stmt = insert(activity).values(
                        [activity_record_to_dict(r) | {"deleted": False} for r in chunk]
                    )
                    stmt = stmt.on_conflict_do_update(
                        index_elements=[activity.c.flash_id],
                        set_={
                            "deleted": False,
                            "user_fid": stmt.excluded.user_fid,
                            "user_username": stmt.excluded.user_username,
                            "user_pfp_url": stmt.excluded.user_pfp_url,
                        },
                    )
                    result = await self.session.execute(stmt)
                    written += result.rowcount
        except SQLAlchemyError as e:
            logfire.error(
                "Activity record upsert failed",
                count=len(records),
                error=str(e),
            )
            raise StorageError("Failed to upsert activity records") from e

        return written

    async def soft_delete_by_fid(self, fid: Fid) -> int:
        stmt = (
            update(activity)
            .where(activity.c.user_fid == fid, activity.c.deleted.is_(False))
            .values(deleted=True)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete activity records of {fid}") from e
        return result.rowcount

    async def list_flashes(
        self,
        fid: Optional[Fid] = None,
        username: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[AttributedFlash]:
        stmt = (
            select(activity, *catalog_columns())
            .select_from(
                activity.outerjoin(catalog, activity.c.flash_id == catalog.c.flash_id)
            )
            .where(activity.c.deleted.is_(False))
        )
        if fid is not None:
            stmt = stmt.where(activity.c.user_fid == fid)
        if username is not None:
            stmt = stmt.where(activity.c.user_username == username)
        stmt = (
            stmt.order_by(
                catalog.c.timestamp.desc().nulls_last(), activity.c.flash_id.desc()
            )
            .offset(offset)
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_attributed_flash(row) for row in result.mappings()]

    async def count_by_fid(self, fid: Fid) -> int:
        stmt = (
            select(func.count())
            .select_from(activity)
            .where(activity.c.user_fid == fid, activity.c.deleted.is_(False))
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def distinct_cities_by_fid(self, fid: Fid) -> list[str]:
        stmt = (
            select(distinct(catalog.c.city))
            .select_from(activity.join(catalog, activity.c.flash_id == catalog.c.flash_id))
            .where(
                activity.c.user_fid == fid,
                activity.c.deleted.is_(False),
                catalog.c.city.is_not(None),
            )
            .order_by(catalog.c.city)
        )
        result = await self._execute(stmt)
        return list(result.scalars())

    async def leaderboard(self, limit: int) -> list[LeaderboardEntry]:
        flash_count = func.count(activity.c.flash_id)
        stmt = (
            select(
                activity.c.user_fid,
                func.max(activity.c.user_username).label("username"),
                func.max(activity.c.user_pfp_url).label("pfp_url"),
                flash_count.label("flash_count"),
                func.count(distinct(catalog.c.city)).label("city_count"),
            )
            .select_from(
                activity.outerjoin(catalog, activity.c.flash_id == catalog.c.flash_id)
            )
            .where(activity.c.deleted.is_(False))
            .group_by(activity.c.user_fid)
            .order_by(flash_count.desc(), activity.c.user_fid)
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [
            LeaderboardEntry(
                fid=row["user_fid"],
                username=row["username"],
                pfp_url=row["pfp_url"],
                flash_count=row["flash_count"],
                city_count=row["city_count"],
            )
            for row in result.mappings()
        ]

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("Failed to read activity records") from e
