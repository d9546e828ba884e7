"""User document domain service."""

import logfire

from remark.domain.error import NotFoundError
from remark.domain.model import UserDocument
from remark.domain.repository import UserDocumentRepository
from remark.domain.value import Username
from remark.util.time import iso_now

from .base import Service


class UserService(Service):
    """Domain service for user document lifecycle.

    Documents are created on registration and never deleted or renamed.
    """

    def __init__(self, user_document_repository: UserDocumentRepository) -> None:
        """Initialize user service.

        Args:
            user_document_repository: User document repository
        """
        self.user_document_repository = user_document_repository

    async def create_if_absent(self, username: Username) -> bool:
        """Create an empty document for the user unless one exists.

        Presence is probed first so an existing document is never read or
        rewritten; the create itself is conditional on absence, so a racing
        registration cannot overwrite a document either.

        Args:
            username: Normalized username

        Returns:
            True if a new document was written
        """
        with logfire.span("user_service.create_if_absent", username=username.root):
            if await self.user_document_repository.exists(username):
                logfire.info("User already registered", username=username.root)
                return False

            document = UserDocument(username=username, created_at=iso_now(), comments=[])
            created = await self.user_document_repository.create(document)
            if created:
                logfire.info("User document created", username=username.root)
            else:
                logfire.info("User document created concurrently", username=username.root)
            return created

    async def exists(self, username: Username) -> bool:
        """Check whether a user is registered.

        Args:
            username: Normalized username

        Returns:
            True if the user's document exists
        """
        with logfire.span("user_service.exists", username=username.root):
            return await self.user_document_repository.exists(username)

    async def get_document(self, username: Username) -> UserDocument:
        """Read a user's document.

        Args:
            username: Normalized username

        Returns:
            User document

        Raises:
            NotFoundError: If the user has no document
        """
        document = await self.user_document_repository.find(username)
        if document is None:
            logfire.warn("User document not found", username=username.root)
            raise NotFoundError("user", username.root)
        return document
