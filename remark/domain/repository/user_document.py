"""User document repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from remark.domain.model import UserDocument
from remark.domain.value import Username


@dataclass(frozen=True)
class UsernamePage:
    """One page of a username listing.

    ``cursor`` is opaque; ``None`` means the listing is exhausted.
    """

    usernames: list[Username] = field(default_factory=list)
    cursor: str | None = None


class UserDocumentRepository(ABC):
    """Repository for the UserDocument aggregate.

    Defines the contract for user document persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def exists(self, username: Username) -> bool:
        """Check whether a document exists without reading it.

        Args:
            username: Document owner

        Returns:
            True if the document exists
        """
        pass

    @abstractmethod
    async def find(self, username: Username) -> Optional[UserDocument]:
        """Read a user's document.

        Args:
            username: Document owner

        Returns:
            The document (with ``version`` set) if found, None otherwise

        Raises:
            ValueError: If the stored body is not a JSON object
        """
        pass

    @abstractmethod
    async def create(self, document: UserDocument) -> bool:
        """Write a new document only if none exists for its username.

        Args:
            document: Document to create

        Returns:
            True if written, False if a document already existed
        """
        pass

    @abstractmethod
    async def save(self, document: UserDocument) -> UserDocument:
        """Overwrite an existing document.

        The write is conditional on ``document.version`` still being current
        when the store supports it.

        Args:
            document: Document previously returned by ``find`` and modified

        Returns:
            The saved document with its new ``version``

        Raises:
            ConcurrentModificationError: If the stored document changed since it was read
        """
        pass

    @abstractmethod
    async def list_usernames(
        self, cursor: str | None = None, limit: int = 100
    ) -> UsernamePage:
        """List owners of stored documents, one page at a time.

        Stored objects that are not well-formed user documents (wrong key
        shape, invalid username) are skipped, so a page may hold fewer than
        ``limit`` usernames while ``cursor`` is still set.

        Args:
            cursor: Cursor from the previous page, None for the first page
            limit: Maximum number of stored objects to examine

        Returns:
            Page of usernames and the cursor for the next page
        """
        pass
