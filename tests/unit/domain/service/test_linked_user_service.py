"""Unit tests for LinkedUserService."""

import pytest

from flashcastr.domain.error import NotFoundError
from flashcastr.domain.model import ActivityRecord, LinkedUser
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    FlashRepository,
    LinkedUserRepository,
)
from flashcastr.domain.service import LinkedUserService, TtlCache
from flashcastr.domain.value import Fid, FlashId
from tests.conftest import make_flash
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_user(env, fid: int, username: str, flash_ids: list[int]) -> None:
    users = await env.get(LinkedUserRepository)
    records = await env.get(ActivityRecordRepository)
    await users.upsert(LinkedUser(fid=Fid(fid), username=username, signer_uuid="enc"))
    await records.bulk_upsert(
        [
            ActivityRecord(flash_id=FlashId(i), user_fid=Fid(fid), user_username=username)
            for i in flash_ids
        ]
    )


class TestGetUser:
    """Tests for get_user."""

    @pytest.mark.asyncio
    async def test_returns_active_user(self, unit_env):
        await _seed_user(unit_env, 1, "alice", [])
        service = await unit_env.get(LinkedUserService)

        user = await service.get_user(Fid(1))

        assert user.username == "alice"

    @pytest.mark.asyncio
    async def test_deleted_user_not_found(self, unit_env):
        await _seed_user(unit_env, 1, "alice", [])
        service = await unit_env.get(LinkedUserService)
        await service.delete_user(Fid(1))

        with pytest.raises(NotFoundError):
            await service.get_user(Fid(1))

    @pytest.mark.asyncio
    async def test_unknown_user_not_found(self, unit_env):
        service = await unit_env.get(LinkedUserService)

        with pytest.raises(NotFoundError):
            await service.get_user(Fid(999))


class TestListUsers:
    """Tests for list_users."""

    @pytest.mark.asyncio
    async def test_filters_and_paginates(self, unit_env):
        for fid in range(1, 6):
            await _seed_user(unit_env, fid, "bob" if fid % 2 else "carol", [])
        service = await unit_env.get(LinkedUserService)

        bobs = await service.list_users(username="bob")
        second_page = await service.list_users(page=2, limit=2)
        by_fid = await service.list_users(fid=Fid(4))

        assert [u.fid for u in bobs] == [1, 3, 5]
        assert [u.fid for u in second_page] == [3, 4]
        assert [u.username for u in by_fid] == ["carol"]


class TestSetAutoCast:
    """Tests for set_auto_cast."""

    @pytest.mark.asyncio
    async def test_toggles_flag(self, unit_env):
        await _seed_user(unit_env, 1, "alice", [])
        service = await unit_env.get(LinkedUserService)

        user = await service.set_auto_cast(Fid(1), False)

        assert user.auto_cast is False

    @pytest.mark.asyncio
    async def test_unknown_fid_not_found(self, unit_env):
        service = await unit_env.get(LinkedUserService)

        with pytest.raises(NotFoundError):
            await service.set_auto_cast(Fid(404), True)


class TestDeleteUser:
    """Tests for delete_user."""

    @pytest.mark.asyncio
    async def test_soft_deletes_user_and_records(self, unit_env):
        await _seed_user(unit_env, 1, "alice", [10, 11, 12])
        await _seed_user(unit_env, 2, "bob", [20])
        service = await unit_env.get(LinkedUserService)
        users = await unit_env.get(LinkedUserRepository)
        records = await unit_env.get(ActivityRecordRepository)

        removed = await service.delete_user(Fid(1))

        assert removed == 3
        assert (await users.find_by_fid(Fid(1))).deleted is True
        assert await records.count_by_fid(Fid(1)) == 0
        assert await records.count_by_fid(Fid(2)) == 1

    @pytest.mark.asyncio
    async def test_invalidates_leaderboard_cache_after_commit(self, unit_env):
        await _seed_user(unit_env, 1, "alice", [10])
        service = await unit_env.get(LinkedUserService)
        cache = await unit_env.get(TtlCache)
        after_commit = await unit_env.get(AfterCommit)

        await service.delete_user(Fid(1))
        # A reload racing the uncommitted delete still sees the old board
        cache.set("leaderboard", ["stale"], ttl=300)

        assert cache.get("leaderboard") == ["stale"]
        after_commit.run()
        assert cache.get("leaderboard") is None

    @pytest.mark.asyncio
    async def test_unknown_fid_queues_nothing(self, unit_env):
        service = await unit_env.get(LinkedUserService)
        after_commit = await unit_env.get(AfterCommit)

        with pytest.raises(NotFoundError):
            await service.delete_user(Fid(404))

        assert len(after_commit) == 0

    @pytest.mark.asyncio
    async def test_unknown_fid_not_found(self, unit_env):
        service = await unit_env.get(LinkedUserService)

        with pytest.raises(NotFoundError):
            await service.delete_user(Fid(404))


class TestFlashes:
    """Tests for get_flashes_summary."""

    @pytest.mark.asyncio
    async def test_summary_counts_and_cities(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        flashes.seed(
            [
                make_flash(10, city="Paris", timestamp=1),
                make_flash(11, city="Lyon", timestamp=3),
                make_flash(12, city="Paris", timestamp=2),
            ]
        )
        await _seed_user(unit_env, 1, "alice", [10, 11, 12, 13])
        service = await unit_env.get(LinkedUserService)

        page, count, cities = await service.get_flashes_summary(Fid(1), limit=2)

        assert count == 4
        assert cities == ["Lyon", "Paris"]
        assert [f.record.flash_id for f in page] == [11, 12]
