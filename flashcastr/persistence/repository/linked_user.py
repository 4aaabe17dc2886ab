"""PostgreSQL implementation of LinkedUser repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flashcastr.domain.error import StorageError
from flashcastr.domain.model import LinkedUser
from flashcastr.domain.repository import LinkedUserRepository
from flashcastr.domain.value import Fid
from flashcastr.persistence.mappers import linked_user_to_dict, row_to_linked_user
from flashcastr.persistence.tables import flashcastr_users_table as users


class PostgresLinkedUserRepository(LinkedUserRepository):
    """PostgreSQL implementation of LinkedUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session (one per request)
        """
        self.session = session

    async def upsert(self, user: LinkedUser) -> LinkedUser:
        values = linked_user_to_dict(user)
        stmt = (
            insert(users)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[users.c.fid],
                set_={
                    "username": values["username"],
                    "signer_uuid": values["signer_uuid"],
                    "deleted": False,
                    "updated_at": func.now(),
                },
            )
            .returning(users)
        )

        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except SQLAlchemyError as e:
            logfire.error("Linked user upsert failed", fid=user.fid, error=str(e))
            raise StorageError(f"Failed to upsert linked user {user.fid}") from e

        if row is None:
            raise StorageError(f"Upsert of linked user {user.fid} affected no rows")
        return row_to_linked_user(row)

    async def find_by_fid(self, fid: Fid) -> Optional[LinkedUser]:
        stmt = select(users).where(users.c.fid == fid)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read linked user {fid}") from e
        row = result.mappings().first()
        return row_to_linked_user(row) if row else None

    async def find_many(
        self,
        username: Optional[str] = None,
        fid: Optional[Fid] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[LinkedUser]:
        stmt = select(users).where(users.c.deleted.is_(False))
        if username is not None:
            stmt = stmt.where(users.c.username == username)
        if fid is not None:
            stmt = stmt.where(users.c.fid == fid)
        stmt = stmt.order_by(users.c.fid).offset(offset).limit(limit)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("Failed to list linked users") from e
        return [row_to_linked_user(row) for row in result.mappings()]

    async def update_auto_cast(self, fid: Fid, auto_cast: bool) -> bool:
        stmt = (
            update(users)
            .where(users.c.fid == fid, users.c.deleted.is_(False))
            .values(auto_cast=auto_cast, updated_at=func.now())
        )
        return await self._update(stmt, fid)

    async def soft_delete(self, fid: Fid) -> bool:
        stmt = (
            update(users)
            .where(users.c.fid == fid, users.c.deleted.is_(False))
            .values(deleted=True, updated_at=func.now())
        )
        return await self._update(stmt, fid)

    async def _update(self, stmt, fid: Fid) -> bool:
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Linked user update failed", fid=fid, error=str(e))
            raise StorageError(f"Failed to update linked user {fid}") from e
        return result.rowcount > 0
