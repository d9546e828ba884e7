"""Comment domain service."""

import re
from collections.abc import Callable
from typing import TypeVar
from uuid import uuid4

import logfire

from remark.config import CommentSettings
from remark.domain.error import (
    ConcurrentModificationError,
    QuotaExceededError,
    ValidationError,
)
from remark.domain.model import CommentEntry, UserDocument
from remark.domain.repository import UserDocumentRepository
from remark.domain.value import CommentId, ThreadId, Username
from remark.util.time import iso_now

from .base import Service
from .user_service import UserService

T = TypeVar("T")

# Whitespace plus the byte order mark, which str.strip() keeps
EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")


class CommentService(Service):
    """Domain service for appending and deleting a user's comments.

    Every mutation is a read-modify-write of the caller's whole document.
    Writes are compare-and-swap on the document version; a lost race re-reads
    and retries up to ``max_write_attempts`` times.
    """

    def __init__(
        self,
        user_service: UserService,
        user_document_repository: UserDocumentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            user_service: User service for loading documents
            user_document_repository: User document repository
            comment_settings: Comment limits
        """
        self.user_service = user_service
        self.user_document_repository = user_document_repository
        self.comment_settings = comment_settings

    def clean_text(self, text: str) -> str:
        """Trim and validate comment text.

        Raises:
            ValidationError: ``text_required`` if blank, ``text_too_long`` if over the limit
        """
        cleaned = EDGE_SPACE.sub("", text)
        if not cleaned:
            raise ValidationError("text_required")
        if len(cleaned) > self.comment_settings.max_text_length:
            raise ValidationError("text_too_long")
        return cleaned

    async def _mutate(
        self,
        username: Username,
        mutate: Callable[[UserDocument], tuple[UserDocument | None, T]],
    ) -> T:
        """Run a read-modify-write cycle with retry on write conflicts.

        ``mutate`` returns the document to save (None to skip the write) and
        the value to hand back to the caller.
        """
        attempts = self.comment_settings.max_write_attempts
        for attempt in range(1, attempts + 1):
            document = await self.user_service.get_document(username)
            updated, result = mutate(document)
            if updated is None:
                return result
            try:
                await self.user_document_repository.save(updated)
                return result
            except ConcurrentModificationError:
                logfire.warn(
                    "User document changed during write, retrying",
                    username=username.root,
                    attempt=attempt,
                )

        logfire.error(
            "Giving up on user document write", username=username.root, attempts=attempts
        )
        raise ConcurrentModificationError()

    async def append(
        self, username: Username, thread_id: ThreadId, text: str
    ) -> CommentEntry:
        """Append a comment to the user's document.

        Args:
            username: Authenticated username (document owner)
            thread_id: Thread the comment belongs to
            text: Comment text (trimmed before storing)

        Returns:
            Created comment entry

        Raises:
            ValidationError: If the text is blank or too long
            NotFoundError: If the user has no document
            QuotaExceededError: If the user already has the maximum number of comments
            ConcurrentModificationError: If every write attempt lost a race
        """
        with logfire.span(
            "comment_service.append",
            username=username.root,
            thread_id=thread_id.root,
        ):
            comment = CommentEntry(
                id=CommentId(str(uuid4())),
                thread_id=thread_id.root,
                text=self.clean_text(text),
                created_at=iso_now(),
            )

            def _append(document: UserDocument) -> tuple[UserDocument, CommentEntry]:
                if document.comment_count >= self.comment_settings.max_comments_per_user:
                    logfire.warn(
                        "Comment quota exceeded",
                        username=username.root,
                        count=document.comment_count,
                    )
                    raise QuotaExceededError()
                return document.with_comment(comment), comment

            saved = await self._mutate(username, _append)
            logfire.info(
                "Comment appended",
                comment_id=saved.id,
                username=username.root,
                thread_id=thread_id.root,
                text_length=len(saved.text),
            )
            return saved

    async def remove(
        self, username: Username, thread_id: ThreadId, comment_id: CommentId
    ) -> bool:
        """Delete a comment from the user's own document.

        Only the caller's document is ever touched, so another user's comment
        id simply matches nothing.

        Args:
            username: Authenticated username (document owner)
            thread_id: Thread of the comment
            comment_id: Comment ID

        Returns:
            True if an entry was removed, False if nothing matched

        Raises:
            ValidationError: If the comment id is empty
            NotFoundError: If the user has no document
            ConcurrentModificationError: If every write attempt lost a race
        """
        if not comment_id:
            raise ValidationError("comment_id_required")

        with logfire.span(
            "comment_service.remove",
            username=username.root,
            thread_id=thread_id.root,
            comment_id=comment_id,
        ):

            def _remove(document: UserDocument) -> tuple[UserDocument | None, bool]:
                updated = document.without_comment(thread_id.root, comment_id)
                if updated.comment_count == document.comment_count:
                    return None, False
                return updated, True

            deleted = await self._mutate(username, _remove)
            if deleted:
                logfire.info("Comment deleted", comment_id=comment_id, username=username.root)
            else:
                logfire.info(
                    "Comment to delete not found", comment_id=comment_id, username=username.root
                )
            return deleted
