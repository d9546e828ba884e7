"""Read models for thread listings."""

from remark.domain.model.comment import CommentEntry
from remark.domain.model.common import DomainModel
from remark.domain.value import Username


class ThreadComment(DomainModel):
    """A comment together with the user whose document holds it."""

    comment: CommentEntry
    username: Username


class ThreadListing(DomainModel):
    """Result of a thread scan.

    ``truncated`` is set when the scan stopped at the document cap with
    documents left unvisited; ``comments`` is then a subset of the thread.
    """

    thread_id: str
    comments: list[ThreadComment]
    truncated: bool = False
    scanned: int = 0
