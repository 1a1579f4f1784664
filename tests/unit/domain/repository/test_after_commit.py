"""Unit tests for AfterCommit."""

import pytest

from scribe.domain.repository import AfterCommit


class TestAfterCommit:
    """Tests for AfterCommit."""

    @pytest.mark.asyncio
    async def test_run_calls_callbacks_in_order_once(self):
        calls: list[int] = []
        after_commit = AfterCommit()

        async def first() -> None:
            calls.append(1)

        async def second() -> None:
            calls.append(2)

        after_commit.add(first)
        after_commit.add(second)

        await after_commit.run()
        await after_commit.run()

        assert calls == [1, 2]
        assert len(after_commit) == 0

    @pytest.mark.asyncio
    async def test_cancel_drops_callbacks(self):
        calls: list[str] = []
        after_commit = AfterCommit()

        async def callback() -> None:
            calls.append("ran")

        after_commit.add(callback)
        after_commit.cancel()
        after_commit.add(callback)
        await after_commit.run()

        assert after_commit.cancelled
        assert calls == []
