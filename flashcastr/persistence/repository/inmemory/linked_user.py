"""In-memory linked user repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from flashcastr.domain.error import StorageError
from flashcastr.domain.model import LinkedUser
from flashcastr.domain.repository import LinkedUserRepository
from flashcastr.domain.value import Fid


class InMemoryLinkedUserRepository(LinkedUserRepository):
    """In-memory implementation of LinkedUserRepository for testing.

    Set ``fail_upsert`` to make ``upsert`` raise ``StorageError``.
    """

    def __init__(self) -> None:
        self._users: dict[Fid, LinkedUser] = {}
        self.fail_upsert = False
        self.upsert_calls = 0

    async def upsert(self, user: LinkedUser) -> LinkedUser:
        self.upsert_calls += 1
        if self.fail_upsert:
            raise StorageError(f"Failed to upsert linked user {user.fid}")

        now = datetime.now(timezone.utc)
        existing = self._users.get(user.fid)
        stored = user.model_copy(
            update={
                "auto_cast": existing.auto_cast if existing else user.auto_cast,
                "deleted": False,
                "created_at": existing.created_at if existing else now,
                "updated_at": now,
            }
        )
        self._users[user.fid] = stored
        return stored

    async def find_by_fid(self, fid: Fid) -> Optional[LinkedUser]:
        return self._users.get(fid)

    async def find_many(
        self,
        username: Optional[str] = None,
        fid: Optional[Fid] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[LinkedUser]:
        users = [
            u
            for u in sorted(self._users.values(), key=lambda u: u.fid)
            if not u.deleted
            and (username is None or u.username == username)
            and (fid is None or u.fid == fid)
        ]
        return users[offset : offset + limit]

    async def update_auto_cast(self, fid: Fid, auto_cast: bool) -> bool:
        return self._update(fid, auto_cast=auto_cast)

    async def soft_delete(self, fid: Fid) -> bool:
        return self._update(fid, deleted=True)

    def _update(self, fid: Fid, **changes) -> bool:
        user = self._users.get(fid)
        if user is None or user.deleted:
            return False
        self._users[fid] = user.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )
        return True
