"""Strongly typed identifiers for remark domain entities."""

from typing import NewType

# Random uuid4 string, unique within its owning user document
CommentId = NewType("CommentId", str)
