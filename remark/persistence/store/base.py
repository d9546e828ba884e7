"""Object store interface.

A minimal key/value blob API with the operations an S3-compatible bucket
offers: presence probe, read, (conditional) write and paginated prefix
listing. ETags act as version tokens for compare-and-swap writes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class StoreError(Exception):
    """Base object store error."""

    pass


class PreconditionFailedError(StoreError):
    """Raised when a conditional write's If-Match / If-None-Match does not hold."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Precondition failed for {key}")


@dataclass(frozen=True)
class StoredObject:
    """Object body with its ETag."""

    key: str
    body: bytes
    etag: str


@dataclass(frozen=True)
class ObjectPage:
    """One page of a prefix listing; ``cursor`` is None on the last page."""

    keys: list[str] = field(default_factory=list)
    cursor: str | None = None


class ObjectStore(ABC):
    """Async object store."""

    @abstractmethod
    async def head(self, key: str) -> str | None:
        """Return the object's ETag, or None if it does not exist."""
        pass

    @abstractmethod
    async def get(self, key: str) -> StoredObject | None:
        """Read an object, or return None if it does not exist."""
        pass

    @abstractmethod
    async def put(
        self,
        key: str,
        body: bytes,
        *,
        content_type: str = "application/json; charset=utf-8",
        if_match: str | None = None,
        if_none_match: bool = False,
    ) -> str:
        """Write an object.

        Args:
            key: Object key
            body: Object body
            content_type: Stored content type
            if_match: Only write if the current ETag equals this value
            if_none_match: Only write if no object exists at ``key``

        Returns:
            ETag of the written object

        Raises:
            PreconditionFailedError: If a condition does not hold
        """
        pass

    @abstractmethod
    async def list(
        self, prefix: str, cursor: str | None = None, limit: int = 100
    ) -> ObjectPage:
        """List keys under ``prefix`` in lexicographic order.

        Args:
            prefix: Key prefix
            cursor: Continuation cursor from the previous page
            limit: Maximum number of keys to return

        Returns:
            Page of keys and the cursor for the next page
        """
        pass
