"""Domain model entities for remark."""

from remark.domain.model.comment import CommentEntry
from remark.domain.model.thread import ThreadComment, ThreadListing
from remark.domain.model.user_document import UserDocument

__all__ = [
    "CommentEntry",
    "ThreadComment",
    "ThreadListing",
    "UserDocument",
]
