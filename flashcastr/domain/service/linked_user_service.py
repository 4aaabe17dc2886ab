"""Linked user domain service."""

import logfire

from flashcastr.domain.error import NotFoundError
from flashcastr.domain.model import AttributedFlash, LinkedUser
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    LinkedUserRepository,
)
from flashcastr.domain.value import Fid

from .base import Service
from .cache import TtlCache
from .leaderboard_service import LEADERBOARD_CACHE


class LinkedUserService(Service):
    """Domain service for reading and managing linked users."""

    def __init__(
        self,
        linked_user_repository: LinkedUserRepository,
        activity_record_repository: ActivityRecordRepository,
        cache: TtlCache,
        after_commit: AfterCommit,
    ) -> None:
        """Initialize linked user service.

        Args:
            linked_user_repository: Linked user repository
            activity_record_repository: Activity record repository
            cache: Shared aggregate cache (invalidated on deletion)
            after_commit: Request transaction hooks
        """
        self.linked_user_repository = linked_user_repository
        self.activity_record_repository = activity_record_repository
        self.cache = cache
        self.after_commit = after_commit

    async def get_user(self, fid: Fid) -> LinkedUser:
        """Get a non-deleted user.

        Raises:
            NotFoundError: If no active user has this fid
        """
        user = await self.linked_user_repository.find_by_fid(fid)
        if user is None or user.deleted:
            raise NotFoundError("LinkedUser", str(fid))
        return user

    async def list_users(
        self,
        username: str | None = None,
        fid: Fid | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> list[LinkedUser]:
        """List active users, optionally filtered by username or fid."""
        return await self.linked_user_repository.find_many(
            username=username, fid=fid, offset=(page - 1) * limit, limit=limit
        )

    async def set_auto_cast(self, fid: Fid, enabled: bool) -> LinkedUser:
        """Change whether new flashes are published automatically.

        Raises:
            NotFoundError: If no active user has this fid
        """
        with logfire.span("linked_user_service.set_auto_cast", fid=fid, enabled=enabled):
            updated = await self.linked_user_repository.update_auto_cast(fid, enabled)
            if not updated:
                raise NotFoundError("LinkedUser", str(fid))
            logfire.info("Auto cast updated", fid=fid, auto_cast=enabled)
            return await self.get_user(fid)

    async def delete_user(self, fid: Fid) -> int:
        """Soft-delete a user together with their activity records.

        Both updates run in the caller's transaction. The leaderboard cache
        is invalidated once that transaction commits.

        Returns:
            Number of activity records marked deleted

        Raises:
            NotFoundError: If no active user has this fid
        """
        with logfire.span("linked_user_service.delete_user", fid=fid):
            deleted = await self.linked_user_repository.soft_delete(fid)
            if not deleted:
                raise NotFoundError("LinkedUser", str(fid))

            removed = await self.activity_record_repository.soft_delete_by_fid(fid)
            self.after_commit.add(lambda: self.cache.invalidate(LEADERBOARD_CACHE))

            logfire.info("Linked user deleted", fid=fid, flashes=removed)
            return removed

    async def get_flashes_summary(
        self, fid: Fid, page: int = 1, limit: int = 20
    ) -> tuple[list[AttributedFlash], int, list[str]]:
        """A page of flashes plus the user's total count and distinct cities.

        Returns:
            Tuple of (flashes, flash_count, cities)
        """
        with logfire.span("linked_user_service.get_flashes_summary", fid=fid):
            flashes = await self.activity_record_repository.list_flashes(
                fid=fid, offset=(page - 1) * limit, limit=limit
            )
            count = await self.activity_record_repository.count_by_fid(fid)
            cities = await self.activity_record_repository.distinct_cities_by_fid(fid)
            return flashes, count, cities
