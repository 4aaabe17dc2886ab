"""PostgreSQL implementation of the flash identification repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flashcastr.domain.error import StorageError
from flashcastr.domain.model import FlashIdentification
from flashcastr.domain.repository import FlashIdentificationRepository
from flashcastr.domain.value import FlashId
from flashcastr.persistence.mappers import (
    catalog_columns,
    row_to_flash_identification,
)
from flashcastr.persistence.tables import flash_identifications_table as idents
from flashcastr.persistence.tables import flashes_table as catalog


class PostgresFlashIdentificationRepository(FlashIdentificationRepository):
    """Identifications LEFT JOINed with the flash they were matched to."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_many(
        self,
        ipfs_cid: Optional[str] = None,
        matched_flash_id: Optional[FlashId] = None,
        limit: int = 50,
    ) -> list[FlashIdentification]:
        stmt = self._select()
        if ipfs_cid is not None:
            stmt = stmt.where(idents.c.source_ipfs_cid == ipfs_cid)
        if matched_flash_id is not None:
            stmt = stmt.where(idents.c.matched_flash_id == matched_flash_id)
        stmt = stmt.order_by(idents.c.created_at.desc(), idents.c.id.desc()).limit(
            limit
        )
        result = await self._execute(stmt)
        return [row_to_flash_identification(row) for row in result.mappings()]

    async def find_by_id(self, identification_id: int) -> Optional[FlashIdentification]:
        stmt = self._select().where(idents.c.id == identification_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_flash_identification(row) if row else None

    def _select(self):
        return select(idents, *catalog_columns()).select_from(
            idents.outerjoin(catalog, idents.c.matched_flash_id == catalog.c.flash_id)
        )

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("Failed to read flash identifications") from e
