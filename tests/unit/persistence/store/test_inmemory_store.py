"""Unit tests for InMemoryObjectStore conditional writes and listing."""

import pytest

from remark.persistence.store import InMemoryObjectStore, PreconditionFailedError


class TestConditionalPut:
    """Tests for If-Match / If-None-Match semantics."""

    @pytest.mark.asyncio
    async def test_if_none_match_refuses_existing(self):
        """Create-only writes fail when the key exists."""
        store = InMemoryObjectStore()
        await store.put("k", b"one", if_none_match=True)

        with pytest.raises(PreconditionFailedError):
            await store.put("k", b"two", if_none_match=True)

        assert (await store.get("k")).body == b"one"

    @pytest.mark.asyncio
    async def test_if_match_requires_current_etag(self):
        """Writes conditional on a stale ETag fail."""
        store = InMemoryObjectStore()
        first = await store.put("k", b"one")
        second = await store.put("k", b"two", if_match=first)

        with pytest.raises(PreconditionFailedError):
            await store.put("k", b"three", if_match=first)

        assert await store.head("k") == second

    @pytest.mark.asyncio
    async def test_identical_rewrite_changes_etag(self):
        """Rewriting the same bytes still invalidates older ETags."""
        store = InMemoryObjectStore()
        first = await store.put("k", b"same")
        second = await store.put("k", b"same")

        assert first != second

    @pytest.mark.asyncio
    async def test_if_match_on_missing_key_fails(self):
        """A conditional update of a missing object fails."""
        store = InMemoryObjectStore()

        with pytest.raises(PreconditionFailedError):
            await store.put("k", b"x", if_match='"abc"')


class TestList:
    """Tests for paginated prefix listing."""

    @pytest.mark.asyncio
    async def test_pages_in_key_order(self):
        """Listing walks keys in lexicographic order, page by page."""
        store = InMemoryObjectStore()
        for key in ["p/c", "p/a", "p/b", "q/a"]:
            await store.put(key, b"")

        first = await store.list("p/", limit=2)
        second = await store.list("p/", cursor=first.cursor, limit=2)

        assert first.keys == ["p/a", "p/b"]
        assert first.cursor is not None
        assert second.keys == ["p/c"]
        assert second.cursor is None
