"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .thread_service import ThreadService
from .token_service import TokenService
from .user_service import UserService

__all__ = [
    "CommentService",
    "Service",
    "ThreadService",
    "TokenService",
    "UserService",
]
