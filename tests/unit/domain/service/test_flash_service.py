"""Unit tests for FlashService."""

import pytest

from flashcastr.domain.error import NotFoundError
from flashcastr.domain.model import ActivityRecord
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    FlashIdentificationRepository,
    FlashRepository,
)
from flashcastr.domain.service import FlashService
from flashcastr.domain.value import Fid, FlashId
from tests.conftest import make_flash, make_identification
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _attribute(env, fid: int, username: str, flash_ids: list[int]) -> None:
    records = await env.get(ActivityRecordRepository)
    await records.bulk_upsert(
        [
            ActivityRecord(flash_id=FlashId(i), user_fid=Fid(fid), user_username=username)
            for i in flash_ids
        ]
    )


class TestListFlashes:
    """Tests for list_flashes."""

    @pytest.mark.asyncio
    async def test_uncatalogued_flashes_come_last(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        flashes.seed([make_flash(10, timestamp=5)])
        await _attribute(unit_env, 1, "alice", [10, 99])
        service = await unit_env.get(FlashService)

        page = await service.list_flashes(fid=Fid(1))

        assert [f.record.flash_id for f in page] == [10, 99]
        assert page[0].flash.city == "Paris"
        assert page[1].flash is None

    @pytest.mark.asyncio
    async def test_without_filters_is_global_feed(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        flashes.seed([make_flash(i, timestamp=i) for i in (1, 2, 3)])
        await _attribute(unit_env, 1, "alice", [1, 3])
        await _attribute(unit_env, 2, "bob", [2])
        service = await unit_env.get(FlashService)

        feed = await service.list_flashes()
        second_page = await service.list_flashes(page=2, limit=2)

        assert [f.record.flash_id for f in feed] == [3, 2, 1]
        assert [f.record.flash_id for f in second_page] == [1]

    @pytest.mark.asyncio
    async def test_filters_by_username(self, unit_env):
        await _attribute(unit_env, 1, "alice", [1, 2])
        await _attribute(unit_env, 2, "bob", [3])
        service = await unit_env.get(FlashService)

        bobs = await service.list_flashes(username="bob")
        none = await service.list_flashes(fid=Fid(1), username="bob")

        assert [f.record.flash_id for f in bobs] == [3]
        assert none == []

    @pytest.mark.asyncio
    async def test_skips_deleted_records(self, unit_env):
        await _attribute(unit_env, 1, "alice", [1])
        await _attribute(unit_env, 2, "bob", [2])
        records = await unit_env.get(ActivityRecordRepository)
        await records.soft_delete_by_fid(Fid(1))
        service = await unit_env.get(FlashService)

        feed = await service.list_flashes()

        assert [f.record.flash_id for f in feed] == [2]


class TestGetFlash:
    """Tests for the unified flash view."""

    @pytest.mark.asyncio
    async def test_joins_attribution_and_latest_identification(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        identifications = await unit_env.get(FlashIdentificationRepository)
        flashes.seed([make_flash(10, ipfs_cid="bafy10")])
        identifications.seed(
            [
                make_identification(1, "bafy10", 500, minute=0),
                make_identification(2, "bafy10", 501, minute=30),
                make_identification(3, "other", 502, minute=59),
            ]
        )
        await _attribute(unit_env, 1, "alice", [10])
        service = await unit_env.get(FlashService)

        unified = await service.get_flash(FlashId(10))

        assert unified.flash.flash_id == 10
        assert unified.attribution.user_fid == 1
        assert unified.identification.id == 2

    @pytest.mark.asyncio
    async def test_flash_without_attribution_or_identification(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        flashes.seed([make_flash(10)])
        service = await unit_env.get(FlashService)

        unified = await service.get_flash(FlashId(10))

        assert unified.attribution is None
        assert unified.identification is None

    @pytest.mark.asyncio
    async def test_deleted_attribution_is_hidden(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        records = await unit_env.get(ActivityRecordRepository)
        flashes.seed([make_flash(10)])
        await _attribute(unit_env, 1, "alice", [10])
        await records.soft_delete_by_fid(Fid(1))
        service = await unit_env.get(FlashService)

        unified = await service.get_flash(FlashId(10))

        assert unified.attribution is None

    @pytest.mark.asyncio
    async def test_unknown_flash_not_found(self, unit_env):
        service = await unit_env.get(FlashService)

        with pytest.raises(NotFoundError):
            await service.get_flash(FlashId(404))


class TestIdentifications:
    """Tests for list_identifications and get_identification."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_filters(self, unit_env):
        identifications = await unit_env.get(FlashIdentificationRepository)
        identifications.seed(
            [
                make_identification(1, "bafy-a", 500, minute=0),
                make_identification(2, "bafy-b", 500, minute=10),
                make_identification(3, "bafy-a", 501, minute=20),
            ]
        )
        service = await unit_env.get(FlashService)

        everything = await service.list_identifications()
        by_cid = await service.list_identifications(ipfs_cid="bafy-a")
        by_match = await service.list_identifications(matched_flash_id=FlashId(500))
        limited = await service.list_identifications(limit=1)

        assert [i.id for i in everything] == [3, 2, 1]
        assert [i.id for i in by_cid] == [3, 1]
        assert [i.id for i in by_match] == [2, 1]
        assert [i.id for i in limited] == [3]

    @pytest.mark.asyncio
    async def test_get_includes_matched_flash_when_catalogued(self, unit_env):
        flashes = await unit_env.get(FlashRepository)
        identifications = await unit_env.get(FlashIdentificationRepository)
        flashes.seed([make_flash(500, city="Lyon")])
        identifications.seed(
            [
                make_identification(1, "bafy-a", 500),
                make_identification(2, "bafy-b", 999),
            ]
        )
        service = await unit_env.get(FlashService)

        matched = await service.get_identification(1)
        unmatched = await service.get_identification(2)

        assert matched.matched_flash.city == "Lyon"
        assert unmatched.matched_flash is None

    @pytest.mark.asyncio
    async def test_unknown_identification_not_found(self, unit_env):
        service = await unit_env.get(FlashService)

        with pytest.raises(NotFoundError):
            await service.get_identification(404)
