"""Linked user repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from flashcastr.domain.model.linked_user import LinkedUser
from flashcastr.domain.value import Fid


class LinkedUserRepository(ABC):
    """Repository for LinkedUser entities.

    Implementations raise ``StorageError`` when the store fails.
    """

    @abstractmethod
    async def upsert(self, user: LinkedUser) -> LinkedUser:
        """Insert a user or, when the fid exists, overwrite it.

        On conflict the username and encrypted signer are replaced and the
        soft-delete flag is cleared. The stored auto_cast flag is kept;
        the given value only applies to new rows.

        Args:
            user: User to store

        Returns:
            The stored row

        Raises:
            StorageError: If the statement fails or affects no rows
        """
        pass

    @abstractmethod
    async def find_by_fid(self, fid: Fid) -> Optional[LinkedUser]:
        """Find a user by fid, including soft-deleted rows."""
        pass

    @abstractmethod
    async def find_many(
        self,
        username: Optional[str] = None,
        fid: Optional[Fid] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[LinkedUser]:
        """List non-deleted users, optionally filtered, ordered by fid."""
        pass

    @abstractmethod
    async def update_auto_cast(self, fid: Fid, auto_cast: bool) -> bool:
        """Set the auto_cast preference.

        Returns:
            True if a non-deleted user was updated, False if none matched
        """
        pass

    @abstractmethod
    async def soft_delete(self, fid: Fid) -> bool:
        """Mark a user deleted.

        Returns:
            True if a non-deleted user was marked, False if none matched
        """
        pass
