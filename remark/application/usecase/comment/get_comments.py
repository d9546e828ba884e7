"""Get thread comments use case."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from remark.domain.model import CommentEntry
from remark.domain.service import ThreadService
from remark.domain.value import ThreadId


class CommentItem(BaseModel):
    """Comment item in responses (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    thread_id: str
    text: str
    created_at: str

    @classmethod
    def from_entry(cls, comment: CommentEntry) -> "CommentItem":
        """Build from a domain comment entry."""
        return cls(
            id=comment.id,
            thread_id=comment.thread_id,
            text=comment.text,
            created_at=comment.created_at,
        )


class ThreadCommentItem(CommentItem):
    """Comment item tagged with its author."""

    username: str


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    thread_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    thread_id: str
    comments: list[ThreadCommentItem]
    truncated: bool  # True when the user scan cap cut the listing short


class GetCommentsUseCase:
    """Use case for listing all comments of a thread, oldest first."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get comments use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Request with thread ID

        Returns:
            Thread comments sorted by creation time

        Raises:
            ValidationError: If the thread ID is invalid
        """
        thread_id = ThreadId.parse(request.thread_id)
        listing = await self.thread_service.list_comments(thread_id)

        return GetCommentsResponse(
            thread_id=listing.thread_id,
            comments=[
                ThreadCommentItem(
                    id=item.comment.id,
                    thread_id=item.comment.thread_id,
                    text=item.comment.text,
                    created_at=item.comment.created_at,
                    username=item.username.root,
                )
                for item in listing.comments
            ],
            truncated=listing.truncated,
        )
