"""Tests for AsyncTreeWalker.

The async walker shares its semantics with the sync one; these tests cover
the same contract plus async visitors.
"""

import asyncio

import pytest

from svnwalk import (
    SKIP_SUBTREE,
    STOP_WALK,
    AccessForbiddenError,
    StatFailedError,
)
from svnwalk.aio import AsyncTreeWalker
from svnwalk.testing import AsyncInMemoryAccessor


TREE = {
    "root": {
        "x": None,
        "y": {"z": None},
        "w": {"v": None},
    }
}


class TestAsyncWalker:
    """Core contract, async flavour."""

    @pytest.mark.asyncio
    async def test_order_with_sync_visitor(self):
        seen = []

        def visitor(path, node, err):
            seen.append(path)

        accessor = AsyncInMemoryAccessor(TREE)
        result = await AsyncTreeWalker(accessor).walk("root", visitor)

        assert result is None
        assert seen == ["root", "root/x", "root/y", "root/y/z", "root/w", "root/w/v"]

    @pytest.mark.asyncio
    async def test_async_visitor_results_are_awaited(self):
        seen = []

        async def visitor(path, node, err):
            await asyncio.sleep(0)
            seen.append(path)
            if path == "root/y":
                return SKIP_SUBTREE
            return None

        result = await AsyncTreeWalker(AsyncInMemoryAccessor(TREE)).walk("root", visitor)

        assert result is None
        assert seen == ["root", "root/x", "root/y", "root/w", "root/w/v"]

    @pytest.mark.asyncio
    async def test_stop_propagates(self):
        seen = []

        async def visitor(path, node, err):
            seen.append(path)
            return STOP_WALK if path == "root/y/z" else None

        result = await AsyncTreeWalker(AsyncInMemoryAccessor(TREE)).walk("root", visitor)

        assert result is STOP_WALK
        assert seen == ["root", "root/x", "root/y", "root/y/z"]

    @pytest.mark.asyncio
    async def test_root_stat_failure(self):
        error = StatFailedError("boom", url="root")
        calls = []

        def visitor(path, node, err):
            calls.append((path, node, err))

        accessor = AsyncInMemoryAccessor(TREE, stat_errors={"root": error})
        result = await AsyncTreeWalker(accessor).walk("root", visitor)

        assert result is None
        assert calls == [("root", None, error)]

    @pytest.mark.asyncio
    async def test_forbidden_listing_skipped(self):
        error = AccessForbiddenError("forbidden", url="root")
        seen = []

        def visitor(path, node, err):
            seen.append(path)
            return SKIP_SUBTREE if err is error else None

        accessor = AsyncInMemoryAccessor(TREE, children_errors={"root": error})
        result = await AsyncTreeWalker(accessor).walk("root", visitor)

        assert result is None
        assert seen == ["root"]

    @pytest.mark.asyncio
    async def test_child_stat_error_aborts_when_returned(self):
        error = StatFailedError("gone", url="root/y")

        def visitor(path, node, err):
            return err

        accessor = AsyncInMemoryAccessor(TREE, stat_errors={"root/y": error})
        result = await AsyncTreeWalker(accessor).walk("root", visitor)

        assert result is error
        assert accessor.stat_calls == ["root", "root/x", "root/y"]
