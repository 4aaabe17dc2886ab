"""Time-to-live cache for aggregate views."""

import time
from typing import Any, Awaitable, Callable, NamedTuple

import logfire


class _Entry(NamedTuple):
    value: Any
    expires_at: float


class TtlCache:
    """In-process cache keyed by cache name, with a per-entry TTL.

    The clock is injected so expiry can be driven deterministically in tests.
    One instance is shared for the lifetime of the application.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def get(self, name: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(name)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            del self._entries[name]
            return None
        return entry.value

    def set(self, name: str, value: Any, ttl: float) -> None:
        """Store a value for ``ttl`` seconds."""
        self._entries[name] = _Entry(value, self._clock() + ttl)

    async def get_or_load(
        self, name: str, ttl: float, loader: Callable[[], Awaitable[Any]]
    ) -> Any:
        """Return the cached value, computing and storing it on a miss.

        Concurrent misses may each call the loader; the last result wins.
        """
        value = self.get(name)
        if value is not None:
            logfire.debug("Cache hit", cache_name=name)
            return value

        logfire.debug("Cache miss", cache_name=name)
        value = await loader()
        self.set(name, value, ttl)
        return value

    def invalidate(self, name: str) -> None:
        """Drop one entry, and any entry namespaced under it (``name:...``)."""
        prefix = f"{name}:"
        for key in [k for k in self._entries if k == name or k.startswith(prefix)]:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()
