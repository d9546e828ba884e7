"""Create comment use case."""

from typing import Literal

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import ThreadId, Username

from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    thread_id: str
    username: str  # From the verified token, never from the client
    text: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    ok: Literal[True] = True
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for posting a comment to a thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The thread is not looked up: the first comment creates it.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValidationError: If the thread ID or text is invalid
            NotFoundError: If the user has no document
            QuotaExceededError: If the user's comment quota is used up
        """
        thread_id = ThreadId.parse(request.thread_id)
        comment = await self.comment_service.append(
            username=Username(request.username),
            thread_id=thread_id,
            text=request.text,
        )
        return CreateCommentResponse(comment=CommentItem.from_entry(comment))
