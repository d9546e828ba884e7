"""Thread comment routes.

Thread ids may contain slashes, so the ``thread_id`` segment uses the path
converter and can span several path components.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Request

from remark.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from remark.domain.service import TokenService
from remark.interface.api.request import bearer_token, body_string, read_json_object

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


@router.get("/{thread_id:path}/comments", response_model=GetCommentsResponse)
async def get_comments(
    thread_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get every comment of a thread, oldest first. No authentication required.

    The listing reads at most a fixed number of user documents; ``truncated``
    is true when that cap cut the listing short.
    """
    return await get_comments_use_case.execute(GetCommentsRequest(thread_id=thread_id))


@router.post("/{thread_id:path}/comments", response_model=CreateCommentResponse)
async def create_comment(
    thread_id: str,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Post a comment to a thread as the token's user.

    Example:
        POST /threads/ch2/comments
        Authorization: Bearer <token>
        {"text": "first"}

        Response:
        {"ok": true, "comment": {"id": "...", "threadId": "ch2", "text": "first",
                                 "createdAt": "2025-01-31T12:00:00.000Z"}}
    """
    username = token_service.authenticate(bearer_token(authorization))
    body = await read_json_object(request)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            thread_id=thread_id,
            username=username.root,
            text=body_string(body, "text"),
        )
    )


@router.delete(
    "/{thread_id:path}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete one of the token user's own comments.

    Returns ``deleted: false`` when no such comment exists in the caller's
    document, including when the id belongs to another user's comment.
    """
    username = token_service.authenticate(bearer_token(authorization))
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            thread_id=thread_id,
            comment_id=comment_id,
            username=username.root,
        )
    )
