"""Object store implementation of the UserDocument repository."""

from typing import Optional

from remark.domain.error import ConcurrentModificationError
from remark.domain.model import UserDocument
from remark.domain.repository import UserDocumentRepository, UsernamePage
from remark.domain.value import USERNAME_PATTERN, Username
from remark.persistence.mappers import document_to_json, json_to_document
from remark.persistence.store import ObjectStore, PreconditionFailedError

DOCUMENT_NAME = "data.json"


class ObjectStoreUserDocumentRepository(UserDocumentRepository):
    """UserDocumentRepository storing one JSON object per user.

    Keys have the shape ``{prefix}{username}/data.json``.
    """

    def __init__(
        self,
        store: ObjectStore,
        prefix: str = "thesis/",
        conditional_writes: bool = True,
    ) -> None:
        """Initialize repository.

        Args:
            store: Object store holding the documents
            prefix: Key namespace for user documents
            conditional_writes: Guard writes with If-Match / If-None-Match
        """
        self.store = store
        self.prefix = prefix
        self.conditional_writes = conditional_writes

    def key_for(self, username: Username) -> str:
        """Storage key of a user's document."""
        return f"{self.prefix}{username.root}/{DOCUMENT_NAME}"

    def username_from_key(self, key: str) -> Username | None:
        """Owner of a key, or None if the key is not a user document."""
        if not key.startswith(self.prefix):
            return None
        parts = key[len(self.prefix) :].split("/")
        if len(parts) != 2 or parts[1] != DOCUMENT_NAME:
            return None
        # Keys are written normalized; anything else was not written by us
        if not USERNAME_PATTERN.match(parts[0]):
            return None
        return Username(parts[0])

    async def exists(self, username: Username) -> bool:
        """Check document presence with a HEAD probe."""
        return await self.store.head(self.key_for(username)) is not None

    async def find(self, username: Username) -> Optional[UserDocument]:
        """Read a user's document."""
        obj = await self.store.get(self.key_for(username))
        if obj is None:
            return None
        return json_to_document(username, obj.body, version=obj.etag)

    async def create(self, document: UserDocument) -> bool:
        """Write a document unless one already exists."""
        try:
            await self.store.put(
                self.key_for(document.username),
                document_to_json(document),
                if_none_match=self.conditional_writes,
            )
        except PreconditionFailedError:
            return False
        return True

    async def save(self, document: UserDocument) -> UserDocument:
        """Overwrite a document, conditional on its version."""
        if_match = document.version if self.conditional_writes else None
        try:
            etag = await self.store.put(
                self.key_for(document.username),
                document_to_json(document),
                if_match=if_match,
            )
        except PreconditionFailedError as e:
            raise ConcurrentModificationError() from e
        return document.model_copy(update={"version": etag})

    async def list_usernames(
        self, cursor: str | None = None, limit: int = 100
    ) -> UsernamePage:
        """List document owners one store page at a time."""
        page = await self.store.list(self.prefix, cursor=cursor, limit=limit)
        usernames = [
            username
            for username in (self.username_from_key(key) for key in page.keys)
            if username is not None
        ]
        return UsernamePage(usernames=usernames, cursor=page.cursor)
