"""Comment entry.

A comment belongs to exactly one user document and is tagged with the
thread it was posted to. Comments are never edited; they are only appended
and deleted.
"""

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId


class CommentEntry(DomainModel):
    """Comment entry owned by a user document.

    Identity is the ``(thread_id, id)`` pair within the owning document.
    ``created_at`` is an ISO-8601 UTC string assigned by the server and is
    the ordering key for readers.
    """

    id: CommentId
    thread_id: str
    text: str = Field(min_length=1)
    created_at: str
