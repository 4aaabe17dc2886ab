"""Unit tests for TtlCache."""

import pytest

from flashcastr.domain.service import TtlCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestTtlCache:
    """Tests for expiry and invalidation."""

    def test_entry_expires_after_ttl(self):
        clock = FakeClock()
        cache = TtlCache(clock=clock)
        cache.set("leaderboard", [1, 2], ttl=60)

        clock.now += 59
        assert cache.get("leaderboard") == [1, 2]

        clock.now += 1
        assert cache.get("leaderboard") is None

    def test_invalidate_drops_namespaced_entries(self):
        cache = TtlCache(clock=FakeClock())
        cache.set("trending_cities:6:10", ["a"], ttl=60)
        cache.set("trending_cities:24:10", ["b"], ttl=60)
        cache.set("leaderboard", ["c"], ttl=60)

        cache.invalidate("trending_cities")

        assert cache.get("trending_cities:6:10") is None
        assert cache.get("trending_cities:24:10") is None
        assert cache.get("leaderboard") == ["c"]

    def test_clear(self):
        cache = TtlCache(clock=FakeClock())
        cache.set("leaderboard", ["c"], ttl=60)

        cache.clear()

        assert cache.get("leaderboard") is None

    @pytest.mark.asyncio
    async def test_get_or_load_calls_loader_once_until_expiry(self):
        clock = FakeClock()
        cache = TtlCache(clock=clock)
        calls = []

        async def loader():
            calls.append(clock.now)
            return []

        await cache.get_or_load("leaderboard", 10, loader)
        await cache.get_or_load("leaderboard", 10, loader)
        clock.now += 10
        await cache.get_or_load("leaderboard", 10, loader)

        assert len(calls) == 2
