"""Unit tests for the in-memory linked user repository."""

import pytest

from flashcastr.domain.model import LinkedUser
from flashcastr.domain.value import Fid
from flashcastr.persistence.repository.inmemory import InMemoryLinkedUserRepository


class TestUpsert:
    """Tests for upsert."""

    @pytest.mark.asyncio
    async def test_overwrites_and_keeps_created_at(self):
        repo = InMemoryLinkedUserRepository()
        first = await repo.upsert(LinkedUser(fid=Fid(1), username="a", signer_uuid="s1"))

        second = await repo.upsert(
            LinkedUser(fid=Fid(1), username="b", signer_uuid="s2", auto_cast=False)
        )

        assert second.username == "b"
        assert second.signer_uuid == "s2"
        assert second.created_at == first.created_at

    @pytest.mark.asyncio
    async def test_keeps_stored_auto_cast(self):
        repo = InMemoryLinkedUserRepository()
        await repo.upsert(LinkedUser(fid=Fid(1), username="a", signer_uuid="s1"))
        await repo.update_auto_cast(Fid(1), False)

        relinked = await repo.upsert(
            LinkedUser(fid=Fid(1), username="a", signer_uuid="s2", auto_cast=True)
        )

        assert relinked.auto_cast is False

    @pytest.mark.asyncio
    async def test_new_user_takes_given_auto_cast(self):
        repo = InMemoryLinkedUserRepository()

        user = await repo.upsert(
            LinkedUser(fid=Fid(1), username="a", signer_uuid="s", auto_cast=False)
        )

        assert user.auto_cast is False

    @pytest.mark.asyncio
    async def test_find_by_fid_includes_deleted(self):
        repo = InMemoryLinkedUserRepository()
        await repo.upsert(LinkedUser(fid=Fid(1), username="a", signer_uuid="s"))
        await repo.soft_delete(Fid(1))

        assert (await repo.find_by_fid(Fid(1))).deleted is True
        assert await repo.find_many() == []

    @pytest.mark.asyncio
    async def test_updates_skip_deleted_users(self):
        repo = InMemoryLinkedUserRepository()
        await repo.upsert(LinkedUser(fid=Fid(1), username="a", signer_uuid="s"))
        await repo.soft_delete(Fid(1))

        assert await repo.update_auto_cast(Fid(1), False) is False
        assert await repo.soft_delete(Fid(1)) is False
