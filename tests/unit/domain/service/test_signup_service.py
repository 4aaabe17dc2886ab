"""Unit tests for SignupService."""

import pytest

from flashcastr.adapter.invaders import InvadersClient
from flashcastr.adapter.neynar import NeynarClient
from flashcastr.config import SecuritySettings, SignupSettings
from flashcastr.domain.error import InvalidInputError, UpstreamError
from flashcastr.domain.model import ActivityRecord, LinkedUser
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    LinkedUserRepository,
)
from flashcastr.domain.service import SignupService, TtlCache
from flashcastr.domain.value import Fid, FlashId, SignupStatus
from flashcastr.util.crypto import decrypt
from flashcastr.util.error import ConfigurationError
from tests.conftest import TEST_ENCRYPTION_KEY
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

FID = Fid(4242)
SIGNER = "signer-uuid-1"
PLAYER = "invader_one"


async def _deps(env):
    return (
        await env.get(SignupService),
        await env.get(NeynarClient),
        await env.get(InvadersClient),
        await env.get(LinkedUserRepository),
        await env.get(ActivityRecordRepository),
    )


class TestInitiate:
    """Tests for initiate."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["", "   "])
    async def test_blank_username_rejected_before_any_call(self, unit_env, username):
        service, neynar, *_ = await _deps(unit_env)

        with pytest.raises(InvalidInputError):
            await service.initiate(username)

        assert neynar.calls == []

    @pytest.mark.asyncio
    async def test_overlong_username_rejected_before_any_call(self, unit_env):
        service, neynar, *_ = await _deps(unit_env)

        with pytest.raises(InvalidInputError):
            await service.initiate("x" * 300)

        assert neynar.calls == []

    @pytest.mark.asyncio
    async def test_username_at_length_limit_accepted(self, unit_env):
        service, neynar, *_ = await _deps(unit_env)

        await service.initiate("x" * 255)

        assert neynar.calls == [("create_signer", True)]

    @pytest.mark.asyncio
    async def test_creates_sponsored_signer(self, unit_env):
        service, neynar, _, users, _ = await _deps(unit_env)

        signer = await service.initiate(PLAYER)

        assert neynar.calls == [("create_signer", True)]
        assert signer.status == "pending_approval"
        assert signer.signer_approval_url is not None
        assert await users.find_many() == []

    @pytest.mark.asyncio
    async def test_upstream_failure_wrapped(self, unit_env):
        service, neynar, *_ = await _deps(unit_env)
        neynar.fail_create = True

        with pytest.raises(UpstreamError, match="Mock signer creation failure"):
            await service.initiate(PLAYER)


class TestPollStatus:
    """Tests for poll_status state mapping."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "upstream, expected",
        [
            ("pending_approval", SignupStatus.PENDING_APPROVAL),
            ("revoked", SignupStatus.REVOKED),
        ],
    )
    async def test_non_approved_statuses_have_no_side_effects(
        self, unit_env, upstream, expected
    ):
        service, neynar, invaders, users, records = await _deps(unit_env)
        neynar.add_signer(SIGNER, upstream)

        outcome = await service.poll_status(SIGNER, PLAYER)

        assert outcome.status is expected
        assert outcome.label == expected.value
        assert invaders.requests == []
        assert users.upsert_calls == 0
        assert records.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_unrecognized_status_surfaces_as_unknown(self, unit_env):
        service, neynar, invaders, users, _ = await _deps(unit_env)
        neynar.add_signer(SIGNER, "expired")

        outcome = await service.poll_status(SIGNER, PLAYER)

        assert outcome.status is SignupStatus.UNKNOWN
        assert outcome.label == "UNKNOWN_EXPIRED"
        assert invaders.requests == []
        assert users.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_approved_without_fid_is_still_pending(self, unit_env):
        service, neynar, _, users, _ = await _deps(unit_env)
        neynar.add_signer(SIGNER, "approved", fid=None)

        outcome = await service.poll_status(SIGNER, PLAYER)

        assert outcome.status is SignupStatus.PENDING_APPROVAL
        assert users.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_lookup_failure_reported_not_raised(self, unit_env):
        service, neynar, *_ = await _deps(unit_env)
        neynar.fail_lookup = True

        outcome = await service.poll_status(SIGNER, PLAYER)

        assert outcome.status is SignupStatus.ERROR_LOOKUP
        assert "Mock signer lookup failure" in outcome.message

    @pytest.mark.asyncio
    async def test_approved_finalizes(self, unit_env):
        service, neynar, invaders, users, _ = await _deps(unit_env)
        neynar.add_signer(SIGNER, "approved", fid=FID)
        invaders.add_flashes(PLAYER, 3)

        outcome = await service.poll_status(SIGNER, PLAYER)

        assert outcome.status is SignupStatus.APPROVED_FINALIZED
        assert outcome.fid == FID
        assert outcome.user.fid == FID
        assert await users.find_by_fid(FID) is not None

    @pytest.mark.asyncio
    async def test_storage_failure_reported_as_finalization_error(self, unit_env):
        service, neynar, _, users, _ = await _deps(unit_env)
        neynar.add_signer(SIGNER, "approved", fid=FID)
        users.fail_upsert = True

        outcome = await service.poll_status(SIGNER, PLAYER)

        assert outcome.status is SignupStatus.ERROR_FINALIZATION
        assert outcome.fid == FID
        assert outcome.message


class TestFinalize:
    """Tests for finalize."""

    @pytest.mark.asyncio
    async def test_stores_encrypted_signer(self, unit_env):
        service, *_ = await _deps(unit_env)

        user = await service.finalize(FID, SIGNER, PLAYER)

        assert user.username == PLAYER
        assert user.auto_cast is True
        assert user.deleted is False
        assert user.signer_uuid != SIGNER
        assert decrypt(user.signer_uuid, TEST_ENCRYPTION_KEY) == SIGNER

    @pytest.mark.asyncio
    async def test_trims_player_name(self, unit_env):
        service, *_ = await _deps(unit_env)

        user = await service.finalize(FID, SIGNER, f"  {PLAYER} ")

        assert user.username == PLAYER

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        service, _, invaders, _, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 25)

        first = await service.finalize(FID, SIGNER, PLAYER)
        second = await service.finalize(FID, SIGNER, PLAYER)

        assert (second.fid, second.username, second.auto_cast, second.deleted) == (
            first.fid,
            first.username,
            first.auto_cast,
            first.deleted,
        )
        assert decrypt(second.signer_uuid, TEST_ENCRYPTION_KEY) == SIGNER
        assert len(records.all()) == 25

    @pytest.mark.asyncio
    async def test_pages_until_has_next_is_false(self, unit_env):
        service, _, invaders, _, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 70)

        await service.finalize(FID, SIGNER, PLAYER)

        assert [r["offset"] for r in invaders.requests] == [0, 20, 40, 60]
        assert all(r["limit"] == 20 for r in invaders.requests)
        assert await records.count_by_fid(FID) == 70

    @pytest.mark.asyncio
    async def test_player_filter_is_escaped(self, unit_env):
        service, _, invaders, _, records = await _deps(unit_env)
        invaders.add_flashes("a.b", 2, start_id=1)
        invaders.add_flashes("axb", 3, start_id=100)

        await service.finalize(FID, SIGNER, "a.b")

        assert invaders.requests[0]["player"] == r"a\.b"
        assert sorted(r.flash_id for r in records.all()) == [1, 2]

    @pytest.mark.asyncio
    async def test_import_ceiling_exceeded_skips_records(self, unit_env):
        service, _, invaders, users, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 7001)

        user = await service.finalize(FID, SIGNER, PLAYER)

        assert user.fid == FID
        assert await users.find_by_fid(FID) is not None
        assert records.all() == []
        assert records.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_import_at_ceiling_writes_everything(self, unit_env):
        service, _, invaders, _, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 7000)

        await service.finalize(FID, SIGNER, PLAYER)

        assert len(records.all()) == 7000

    @pytest.mark.asyncio
    async def test_profile_failure_falls_back_to_player_name(self, unit_env):
        service, neynar, invaders, _, records = await _deps(unit_env)
        neynar.fail_profiles = True
        invaders.add_flashes(PLAYER, 2)

        user = await service.finalize(FID, SIGNER, PLAYER)

        assert user.fid == FID
        assert {r.user_username for r in records.all()} == {PLAYER}
        assert {r.user_pfp_url for r in records.all()} == {None}

    @pytest.mark.asyncio
    async def test_attribution_uses_farcaster_profile(self, unit_env):
        service, neynar, invaders, _, records = await _deps(unit_env)
        neynar.add_profile(FID, "fc_name", pfp_url="https://example.com/pfp.png")
        invaders.add_flashes(PLAYER, 2)

        await service.finalize(FID, SIGNER, PLAYER)

        assert {r.user_username for r in records.all()} == {"fc_name"}
        assert {r.user_pfp_url for r in records.all()} == {"https://example.com/pfp.png"}
        assert {r.user_fid for r in records.all()} == {FID}

    @pytest.mark.asyncio
    async def test_import_failure_links_user_without_history(self, unit_env):
        service, _, invaders, users, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 50)
        invaders.fail_at_offset = 20

        await service.finalize(FID, SIGNER, PLAYER)

        assert await users.find_by_fid(FID) is not None
        assert records.all() == []

    @pytest.mark.asyncio
    async def test_activity_write_failure_is_not_fatal(self, unit_env):
        service, _, invaders, users, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 5)
        records.fail_upsert = True

        user = await service.finalize(FID, SIGNER, PLAYER)

        assert user.fid == FID
        assert records.all() == []

    @pytest.mark.asyncio
    async def test_relink_clears_soft_delete(self, unit_env):
        service, *_, users, _ = await _deps(unit_env)
        await service.finalize(FID, SIGNER, PLAYER)
        await users.soft_delete(FID)

        user = await service.finalize(FID, SIGNER, PLAYER)

        assert user.deleted is False

    @pytest.mark.asyncio
    async def test_relink_keeps_auto_cast_choice(self, unit_env):
        service, *_, users, _ = await _deps(unit_env)
        await service.finalize(FID, SIGNER, PLAYER)
        await users.update_auto_cast(FID, False)

        user = await service.finalize(FID, "signer-uuid-2", PLAYER)

        assert user.auto_cast is False
        assert decrypt(user.signer_uuid, TEST_ENCRYPTION_KEY) == "signer-uuid-2"

    @pytest.mark.asyncio
    async def test_relink_does_not_revert_concurrent_auto_cast_change(
        self, unit_env, monkeypatch
    ):
        service, *_, users, _ = await _deps(unit_env)
        await service.finalize(FID, SIGNER, PLAYER)
        upsert = users.upsert

        async def upsert_after_concurrent_update(user):
            # Another request turns auto cast off just before the write lands
            await users.update_auto_cast(FID, False)
            return await upsert(user)

        monkeypatch.setattr(users, "upsert", upsert_after_concurrent_update)

        user = await service.finalize(FID, "signer-uuid-2", PLAYER)

        assert user.auto_cast is False

    @pytest.mark.asyncio
    async def test_relink_restores_soft_deleted_records(self, unit_env):
        service, _, invaders, _, records = await _deps(unit_env)
        invaders.add_flashes(PLAYER, 4)
        await service.finalize(FID, SIGNER, PLAYER)
        await records.soft_delete_by_fid(FID)

        await service.finalize(FID, SIGNER, PLAYER)

        assert await records.count_by_fid(FID) == 4

    @pytest.mark.asyncio
    async def test_missing_encryption_key_is_fatal(self, unit_env):
        _, neynar, invaders, users, records = await _deps(unit_env)
        service = SignupService(
            identity_client=neynar,
            activity_client=invaders,
            linked_user_repository=users,
            activity_record_repository=records,
            security_settings=SecuritySettings(encryption_key=None),
            signup_settings=SignupSettings(),
            cache=TtlCache(),
            after_commit=AfterCommit(),
        )

        with pytest.raises(ConfigurationError):
            await service.finalize(FID, SIGNER, PLAYER)

        assert users.upsert_calls == 0


class TestFinalizeDuplicates:
    """Overlapping pages must not produce duplicate records."""

    @pytest.mark.asyncio
    async def test_repeated_flash_ids_written_once(self, unit_env):
        service, _, invaders, _, records = await _deps(unit_env)
        flashes = invaders.add_flashes(PLAYER, 3)
        invaders.flashes.append(flashes[0])

        await service.finalize(FID, SIGNER, PLAYER)

        assert sorted(r.flash_id for r in records.all()) == [1, 2, 3]


class TestFinalizeLeaderboard:
    """An import refreshes the leaderboard once the transaction commits."""

    @pytest.mark.asyncio
    async def test_import_invalidates_leaderboard_after_commit(self, unit_env):
        service, _, invaders, _, _ = await _deps(unit_env)
        cache = await unit_env.get(TtlCache)
        after_commit = await unit_env.get(AfterCommit)
        cache.set("leaderboard", ["stale"], ttl=300)
        invaders.add_flashes(PLAYER, 2)

        await service.finalize(FID, SIGNER, PLAYER)

        assert cache.get("leaderboard") == ["stale"]
        after_commit.run()
        assert cache.get("leaderboard") is None

    @pytest.mark.asyncio
    async def test_no_import_leaves_leaderboard(self, unit_env):
        service, *_ = await _deps(unit_env)
        after_commit = await unit_env.get(AfterCommit)

        await service.finalize(FID, SIGNER, PLAYER)

        assert len(after_commit) == 0


@pytest.mark.asyncio
async def test_existing_cast_hash_survives_relink(unit_env):
    service, _, invaders, _, records = await _deps(unit_env)
    invaders.add_flashes(PLAYER, 1)
    await records.bulk_upsert(
        [
            ActivityRecord(
                flash_id=FlashId(1),
                user_fid=FID,
                user_username="old",
                cast_hash="0xabc",
            )
        ]
    )

    await service.finalize(FID, SIGNER, PLAYER)

    (record,) = records.all()
    assert record.cast_hash == "0xabc"
    assert record.user_username == PLAYER


def test_linked_user_defaults():
    user = LinkedUser(fid=FID, username=PLAYER, signer_uuid="x")
    assert user.auto_cast is True
    assert user.deleted is False
