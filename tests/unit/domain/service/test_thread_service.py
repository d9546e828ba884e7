"""Unit tests for ThreadService."""

import json

import pytest

from remark.config import CommentSettings
from remark.domain.repository import UsernamePage
from remark.domain.service import ThreadService
from remark.domain.value import ThreadId, Username
from remark.persistence.repository import ObjectStoreUserDocumentRepository
from remark.persistence.store import InMemoryObjectStore


def _comment(comment_id: str, thread_id: str, created_at: str, text: str = "x") -> dict:
    return {"id": comment_id, "threadId": thread_id, "text": text, "createdAt": created_at}


async def _seed(store: InMemoryObjectStore, username: str, comments: list[dict]) -> None:
    body = {"username": username, "createdAt": "2025-01-01T00:00:00.000Z", "comments": comments}
    await store.put(f"thesis/{username}/data.json", json.dumps(body).encode())


def _service(
    store: InMemoryObjectStore, settings: CommentSettings | None = None
) -> ThreadService:
    repo = ObjectStoreUserDocumentRepository(store)
    return ThreadService(repo, settings or CommentSettings())


class TestListComments:
    """Tests for ThreadService.list_comments()."""

    @pytest.mark.asyncio
    async def test_empty_store(self):
        """A thread nobody commented on is empty, not an error."""
        service = _service(InMemoryObjectStore())

        listing = await service.list_comments(ThreadId("ch2"))

        assert listing.comments == []
        assert listing.truncated is False
        assert listing.scanned == 0

    @pytest.mark.asyncio
    async def test_collects_across_users_sorted_by_time(self):
        """Comments from every user are merged oldest first."""
        store = InMemoryObjectStore()
        await _seed(
            store,
            "alice",
            [
                _comment("a2", "ch2", "2025-01-03T00:00:00.000Z"),
                _comment("a1", "ch2", "2025-01-01T00:00:00.000Z"),
            ],
        )
        await _seed(store, "bob", [_comment("b1", "ch2", "2025-01-02T00:00:00.000Z")])
        service = _service(store)

        listing = await service.list_comments(ThreadId("ch2"))

        assert [(c.comment.id, c.username.root) for c in listing.comments] == [
            ("a1", "alice"),
            ("b1", "bob"),
            ("a2", "alice"),
        ]

    @pytest.mark.asyncio
    async def test_filters_by_thread(self):
        """Only comments tagged with the requested thread are returned."""
        store = InMemoryObjectStore()
        await _seed(
            store,
            "alice",
            [
                _comment("a1", "ch2", "2025-01-01T00:00:00.000Z"),
                _comment("a2", "ch3", "2025-01-01T00:00:00.000Z"),
                _comment("a3", "ch2/3.1", "2025-01-01T00:00:00.000Z"),
            ],
        )
        service = _service(store)

        listing = await service.list_comments(ThreadId("ch2"))

        assert [c.comment.id for c in listing.comments] == ["a1"]

    @pytest.mark.asyncio
    async def test_equal_timestamps_keep_scan_order(self):
        """Sorting is stable for identical timestamps."""
        store = InMemoryObjectStore()
        same = "2025-01-01T00:00:00.000Z"
        await _seed(store, "alice", [_comment("a1", "t", same), _comment("a2", "t", same)])
        await _seed(store, "bob", [_comment("b1", "t", same)])
        service = _service(store)

        listing = await service.list_comments(ThreadId("t"))

        assert [c.comment.id for c in listing.comments] == ["a1", "a2", "b1"]

    @pytest.mark.asyncio
    async def test_pages_through_all_users(self):
        """Users on later listing pages are included."""
        store = InMemoryObjectStore()
        for i in range(7):
            await _seed(store, f"user{i}", [_comment(f"c{i}", "t", f"2025-01-0{i + 1}T00:00:00.000Z")])
        service = _service(store, CommentSettings(scan_page_size=2))

        listing = await service.list_comments(ThreadId("t"))

        assert len(listing.comments) == 7
        assert listing.scanned == 7
        assert listing.truncated is False

    @pytest.mark.asyncio
    async def test_scan_cap_truncates(self):
        """Documents past max_users_scan are not read and the listing says so."""
        store = InMemoryObjectStore()
        for i in range(5):
            await _seed(store, f"user{i}", [_comment(f"c{i}", "t", "2025-01-01T00:00:00.000Z")])
        service = _service(store, CommentSettings(scan_page_size=2, max_users_scan=3))

        listing = await service.list_comments(ThreadId("t"))

        assert listing.truncated is True
        assert listing.scanned == 3
        assert [c.username.root for c in listing.comments] == ["user0", "user1", "user2"]

    @pytest.mark.asyncio
    async def test_cap_equal_to_user_count_is_not_truncated(self):
        """Reading exactly max_users_scan documents with none left is complete."""
        store = InMemoryObjectStore()
        for i in range(3):
            await _seed(store, f"user{i}", [])
        service = _service(store, CommentSettings(scan_page_size=3, max_users_scan=3))

        listing = await service.list_comments(ThreadId("t"))

        assert listing.truncated is False
        assert listing.scanned == 3

    @pytest.mark.asyncio
    async def test_stray_keys_ignored(self):
        """Keys that are not user documents are skipped."""
        store = InMemoryObjectStore()
        await _seed(store, "alice", [_comment("a1", "t", "2025-01-01T00:00:00.000Z")])
        await store.put("thesis/readme.txt", b"hello")
        await store.put("thesis/alice/avatar.png", b"\x89PNG")
        await store.put("thesis/Bad Name/data.json", b"{}")
        await store.put("other/bob/data.json", b"{}")
        service = _service(store)

        listing = await service.list_comments(ThreadId("t"))

        assert listing.scanned == 1
        assert [c.comment.id for c in listing.comments] == ["a1"]

    @pytest.mark.asyncio
    async def test_malformed_entries_skipped(self):
        """Malformed comment entries do not break the listing."""
        store = InMemoryObjectStore()
        await _seed(
            store,
            "alice",
            [
                _comment("a1", "t", "2025-01-01T00:00:00.000Z"),
                {"id": "broken"},
                "not an object",
            ],
        )
        service = _service(store)

        listing = await service.list_comments(ThreadId("t"))

        assert [c.comment.id for c in listing.comments] == ["a1"]

    @pytest.mark.asyncio
    async def test_document_gone_between_list_and_read(self):
        """A listed document that can no longer be read is skipped."""
        store = InMemoryObjectStore()
        await _seed(store, "alice", [_comment("a1", "t", "2025-01-01T00:00:00.000Z")])
        repo = ObjectStoreUserDocumentRepository(store)
        listed = await repo.list_usernames()

        async def stale_listing(cursor=None, limit=100):
            return UsernamePage(
                usernames=[*listed.usernames, Username("ghost")], cursor=None
            )

        repo.list_usernames = stale_listing
        service = ThreadService(repo, CommentSettings())

        listing = await service.list_comments(ThreadId("t"))

        assert listing.scanned == 2
        assert [c.comment.id for c in listing.comments] == ["a1"]

    @pytest.mark.asyncio
    async def test_unreadable_document_skipped(self):
        """A document whose body is not a JSON object does not fail the listing."""
        store = InMemoryObjectStore()
        await _seed(store, "alice", [_comment("a1", "t", "2025-01-01T00:00:00.000Z")])
        await store.put("thesis/mid/data.json", b"[1, 2]")
        await store.put("thesis/zed/data.json", b"not json")
        service = _service(store)

        listing = await service.list_comments(ThreadId("t"))

        assert listing.scanned == 3
        assert [c.comment.id for c in listing.comments] == ["a1"]
