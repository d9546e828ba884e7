"""In-memory object store for testing."""

import hashlib
from bisect import bisect_right

from remark.persistence.store.base import (
    ObjectPage,
    ObjectStore,
    PreconditionFailedError,
    StoredObject,
)


class InMemoryObjectStore(ObjectStore):
    """In-memory implementation of ObjectStore for testing.

    ETags change on every write (a content hash plus a write counter), so a
    rewrite with identical content still invalidates stale If-Match tokens.
    The listing cursor is the last key returned.
    """

    def __init__(self) -> None:
        self._objects: dict[str, StoredObject] = {}
        self._writes = 0

    def _etag(self, body: bytes) -> str:
        self._writes += 1
        digest = hashlib.md5(body, usedforsecurity=False).hexdigest()
        return f'"{digest}-{self._writes}"'

    async def head(self, key: str) -> str | None:
        """Return the object's ETag."""
        obj = self._objects.get(key)
        return obj.etag if obj else None

    async def get(self, key: str) -> StoredObject | None:
        """Read an object."""
        return self._objects.get(key)

    async def put(
        self,
        key: str,
        body: bytes,
        *,
        content_type: str = "application/json; charset=utf-8",
        if_match: str | None = None,
        if_none_match: bool = False,
    ) -> str:
        """Write an object, honouring conditions."""
        current = self._objects.get(key)
        if if_none_match and current is not None:
            raise PreconditionFailedError(key)
        if if_match is not None and (current is None or current.etag != if_match):
            raise PreconditionFailedError(key)

        etag = self._etag(body)
        self._objects[key] = StoredObject(key=key, body=body, etag=etag)
        return etag

    async def list(
        self, prefix: str, cursor: str | None = None, limit: int = 100
    ) -> ObjectPage:
        """List keys under a prefix."""
        keys = sorted(k for k in self._objects if k.startswith(prefix))
        start = bisect_right(keys, cursor) if cursor else 0
        page = keys[start : start + limit]
        has_more = start + limit < len(keys)
        return ObjectPage(keys=page, cursor=page[-1] if has_more and page else None)
