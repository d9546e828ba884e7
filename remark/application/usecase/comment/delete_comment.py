"""Delete comment use case."""

from typing import Literal

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId, ThreadId, Username


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    thread_id: str
    comment_id: str
    username: str  # From the verified token, never from the client


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    ok: Literal[True] = True
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting one of the caller's own comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Deleting a comment that does not exist (or belongs to someone else)
        is not an error; ``deleted`` is False.

        Raises:
            ValidationError: If the thread ID or comment ID is invalid
            NotFoundError: If the user has no document
        """
        thread_id = ThreadId.parse(request.thread_id)
        deleted = await self.comment_service.remove(
            username=Username(request.username),
            thread_id=thread_id,
            comment_id=CommentId(request.comment_id),
        )
        return DeleteCommentResponse(deleted=deleted)
