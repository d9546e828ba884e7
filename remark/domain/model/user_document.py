"""User document aggregate.

One document per username holds the user's metadata and every comment they
authored. It is read and written as a whole.
"""

from typing import Any

from pydantic import Field

from remark.domain.model.comment import CommentEntry
from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, Username


class UserDocument(DomainModel):
    """User document aggregate root.

    ``version`` is the storage ETag the document was read at. It is not part
    of the persisted body; repositories use it for conditional writes and
    ``None`` means "not read from storage".

    ``passthrough`` holds stored comment entries that do not parse as a
    ``CommentEntry``. They are never shown to readers but are written back
    unchanged and count toward the comment quota.
    """

    username: Username
    created_at: str
    comments: list[CommentEntry] = Field(default_factory=list)
    passthrough: list[Any] = Field(default_factory=list)
    version: str | None = None

    @property
    def comment_count(self) -> int:
        """Number of stored entries, readable or not."""
        return len(self.comments) + len(self.passthrough)

    def with_comment(self, comment: CommentEntry) -> "UserDocument":
        """Return a copy with ``comment`` appended."""
        return self.model_copy(update={"comments": [*self.comments, comment]})

    def without_comment(
        self, thread_id: str, comment_id: CommentId
    ) -> "UserDocument":
        """Return a copy without entries matching both ``thread_id`` and ``comment_id``."""
        remaining = [
            c
            for c in self.comments
            if not (c.thread_id == thread_id and c.id == comment_id)
        ]
        raw_remaining = [
            raw
            for raw in self.passthrough
            if not (
                isinstance(raw, dict)
                and raw.get("threadId") == thread_id
                and raw.get("id") == comment_id
            )
        ]
        return self.model_copy(
            update={"comments": remaining, "passthrough": raw_remaining}
        )
