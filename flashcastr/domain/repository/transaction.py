"""Hooks tied to the request transaction."""

from typing import Callable


class AfterCommit:
    """Callbacks to run once the request transaction has committed.

    One instance per request. The persistence layer calls ``run`` after a
    successful commit and ``discard`` after a rollback, so callbacks never
    observe uncommitted state.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def add(self, callback: Callable[[], None]) -> None:
        """Queue a callback until the transaction commits."""
        self._callbacks.append(callback)

    def run(self) -> None:
        """Run queued callbacks in order and clear the queue."""
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def discard(self) -> None:
        """Drop queued callbacks without running them."""
        self._callbacks = []

    def __len__(self) -> int:
        return len(self._callbacks)
