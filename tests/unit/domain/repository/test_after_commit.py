"""Unit tests for AfterCommit."""

from flashcastr.domain.repository import AfterCommit


class TestAfterCommit:
    """Tests for queueing, running and discarding callbacks."""

    def test_run_calls_in_order_once(self):
        calls = []
        after_commit = AfterCommit()
        after_commit.add(lambda: calls.append("first"))
        after_commit.add(lambda: calls.append("second"))

        after_commit.run()
        after_commit.run()

        assert calls == ["first", "second"]

    def test_discard_drops_callbacks(self):
        calls = []
        after_commit = AfterCommit()
        after_commit.add(lambda: calls.append("dropped"))

        after_commit.discard()
        after_commit.run()

        assert calls == []
        assert len(after_commit) == 0
