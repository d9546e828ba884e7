"""Mappers between domain models and stored JSON documents.

Stored layout (one object per user)::

    {
      "username": "alice",
      "createdAt": "2025-01-31T12:00:00.000Z",
      "comments": [
        {"id": "...", "threadId": "ch2", "text": "...", "createdAt": "..."}
      ]
    }
"""

import json
from typing import Any

import logfire
import pydantic

from remark.domain.model import CommentEntry, UserDocument
from remark.domain.value import CommentId, Username
from remark.util.time import iso_now


def comment_to_dict(comment: CommentEntry) -> dict[str, Any]:
    """Convert comment entry to its stored form."""
    return {
        "id": comment.id,
        "threadId": comment.thread_id,
        "text": comment.text,
        "createdAt": comment.created_at,
    }


def dict_to_comment(data: Any) -> CommentEntry | None:
    """Convert a stored comment to a domain entry.

    Returns None for entries that are not well-formed.
    """
    if not isinstance(data, dict):
        return None
    try:
        return CommentEntry(
            id=CommentId(str(data["id"])),
            thread_id=data["threadId"],
            text=data["text"],
            created_at=data["createdAt"],
        )
    except (KeyError, pydantic.ValidationError):
        return None


def document_to_json(document: UserDocument) -> bytes:
    """Serialize a user document body (``version`` is not stored).

    Unparsed entries are written back exactly as they were read.
    """
    payload = {
        "username": document.username.root,
        "createdAt": document.created_at,
        "comments": [
            *(comment_to_dict(c) for c in document.comments),
            *document.passthrough,
        ],
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def json_to_document(username: Username, body: bytes, version: str | None) -> UserDocument:
    """Parse a stored user document.

    The username always comes from the object key, never from the body.
    A missing ``createdAt`` defaults to now and a missing or non-list
    ``comments`` to empty. Comment entries that are not well-formed are kept
    aside in ``passthrough`` so a later write does not lose them.

    Raises:
        ValueError: If the body is not valid JSON or not a JSON object
    """
    data = json.loads(body.decode("utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"User document for {username} is not a JSON object")

    raw_comments = data.get("comments")
    if not isinstance(raw_comments, list):
        raw_comments = []

    comments = []
    passthrough = []
    for raw in raw_comments:
        comment = dict_to_comment(raw)
        if comment is None:
            passthrough.append(raw)
            continue
        comments.append(comment)

    if passthrough:
        logfire.warn(
            "User document has malformed comment entries",
            username=username.root,
            count=len(passthrough),
        )

    created_at = data.get("createdAt")
    return UserDocument(
        username=username,
        created_at=str(created_at) if created_at is not None else iso_now(),
        comments=comments,
        passthrough=passthrough,
        version=version,
    )
