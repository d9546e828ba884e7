"""Domain value objects for remark."""

from remark.domain.value.identifiers import CommentId
from remark.domain.value.types import (
    USERNAME_PATTERN,
    ThreadId,
    Username,
    normalize_username,
)

__all__ = [
    # Identifiers
    "CommentId",
    # Types
    "ThreadId",
    "Username",
    "USERNAME_PATTERN",
    "normalize_username",
]
