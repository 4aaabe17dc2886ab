"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from flashcastr.domain.model import Flash, FlashIdentification
from flashcastr.domain.value import FlashId

TEST_ENCRYPTION_KEY = "00112233445566778899aabbccddeeff" * 2
TEST_API_KEY = "test-api-key"

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Point Settings at test values for every test."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("SECURITY__ENCRYPTION_KEY", TEST_ENCRYPTION_KEY)
    monkeypatch.setenv("AUTH__API_KEY", TEST_API_KEY)
    monkeypatch.setenv("OBSERVABILITY__SEND_TO_LOGFIRE", "false")


def make_flash(
    flash_id: int,
    player: str = "invader",
    city: str | None = "Paris",
    timestamp: int | None = 1_700_000_000_000,
    ipfs_cid: str | None = None,
) -> Flash:
    """Build a flash with sensible defaults."""
    return Flash(
        flash_id=FlashId(flash_id),
        city=city,
        player=player,
        img=f"https://example.com/{flash_id}.jpg",
        ipfs_cid=ipfs_cid,
        timestamp=timestamp,
    )


def make_identification(
    identification_id: int,
    source_ipfs_cid: str,
    matched_flash_id: int,
    minute: int = 0,
) -> FlashIdentification:
    """Build an identification created ``minute`` minutes past a fixed hour."""
    return FlashIdentification(
        id=identification_id,
        source_ipfs_cid=source_ipfs_cid,
        matched_flash_id=FlashId(matched_flash_id),
        matched_flash_name=f"PA_{matched_flash_id}",
        similarity=0.91,
        confidence=0.87,
        created_at=datetime(2026, 1, 1, 12, minute, tzinfo=timezone.utc),
    )
