"""Thread aggregation domain service."""

import logfire

from remark.config import CommentSettings
from remark.domain.model import ThreadComment, ThreadListing
from remark.domain.repository import UserDocumentRepository
from remark.domain.value import ThreadId

from .base import Service


class ThreadService(Service):
    """Domain service for reading a thread across all users.

    There is no index from thread to comments: a listing reads every user
    document (up to ``max_users_scan``) and keeps the matching comments.
    Cost is proportional to the number of users, not to the thread size.
    """

    def __init__(
        self,
        user_document_repository: UserDocumentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize thread service.

        Args:
            user_document_repository: User document repository
            comment_settings: Scan bounds
        """
        self.user_document_repository = user_document_repository
        self.comment_settings = comment_settings

    async def list_comments(self, thread_id: ThreadId) -> ThreadListing:
        """Collect every comment of a thread, oldest first.

        Scanning stops once ``max_users_scan`` documents have been read. If
        more documents remain, the partial result is returned with
        ``truncated`` set; it never contains comments from documents past
        the cap. Documents that are not valid JSON objects are skipped.

        Args:
            thread_id: Thread to list

        Returns:
            Thread listing sorted by ``created_at``
        """
        page_size = self.comment_settings.scan_page_size
        max_users = self.comment_settings.max_users_scan

        with logfire.span(
            "thread_service.list_comments",
            thread_id=thread_id.root,
            max_users=max_users,
        ):
            collected: list[ThreadComment] = []
            scanned = 0
            truncated = False
            cursor: str | None = None

            while True:
                page = await self.user_document_repository.list_usernames(
                    cursor=cursor, limit=page_size
                )
                for username in page.usernames:
                    if scanned >= max_users:
                        truncated = True
                        break
                    scanned += 1

                    try:
                        document = await self.user_document_repository.find(username)
                    except ValueError:
                        logfire.warn(
                            "Skipping unreadable user document",
                            username=username.root,
                            thread_id=thread_id.root,
                        )
                        continue
                    if document is None:
                        # Listed but gone by the time we read it
                        continue
                    collected.extend(
                        ThreadComment(comment=comment, username=username)
                        for comment in document.comments
                        if comment.thread_id == thread_id.root
                    )

                if truncated or page.cursor is None:
                    break
                cursor = page.cursor

            # ISO timestamps: string order is time order; sort is stable
            collected.sort(key=lambda item: item.comment.created_at)

            if truncated:
                logfire.warn(
                    "Thread scan hit user cap",
                    thread_id=thread_id.root,
                    scanned=scanned,
                    found=len(collected),
                )
            logfire.info(
                "Thread comments listed",
                thread_id=thread_id.root,
                scanned=scanned,
                count=len(collected),
                truncated=truncated,
            )
            return ThreadListing(
                thread_id=thread_id.root,
                comments=collected,
                truncated=truncated,
                scanned=scanned,
            )
