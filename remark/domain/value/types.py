"""Domain value objects for remark.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re
from typing import ClassVar

from pydantic import field_validator

from remark.domain.value.common import RootValueObject

USERNAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]{2,31}$")
THREAD_ID_PATTERN = re.compile(r"^[a-zA-Z0-9._\-/]+$")
MAX_THREAD_ID_LENGTH = 120


def normalize_username(raw: str) -> str:
    """Usernames are case-insensitive and ignore surrounding whitespace."""
    return raw.strip().lower()


class Username(RootValueObject[str]):
    """Account name and storage key of a user document.

    Normalized to lowercase, then 3-32 characters: a leading letter or digit
    followed by letters, digits, underscores or hyphens.
    Examples: 'alice', 'reader_42', 'b-o-b'
    """

    error_code: ClassVar[str] = "invalid_username"

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Trim and lowercase before matching."""
        if isinstance(v, str):
            return normalize_username(v)
        return v

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 3-32 characters: a-z, 0-9, '_' or '-', "
                "starting with a letter or digit"
            )
        return v


class ThreadId(RootValueObject[str]):
    """Identifier of an implicit discussion thread.

    Threads have no registry; any id of the right shape names one. Slashes
    and dots are allowed so section anchors like 'ch2/3.1' can be used as-is.
    """

    error_code: ClassVar[str] = "invalid_thread"

    @field_validator("root")
    @classmethod
    def validate_thread_id(cls, v: str) -> str:
        """Validate thread id format."""
        if not v or len(v) > MAX_THREAD_ID_LENGTH:
            raise ValueError(f"Thread id must be 1-{MAX_THREAD_ID_LENGTH} characters")
        if not THREAD_ID_PATTERN.match(v):
            raise ValueError("Thread id may only contain a-z, A-Z, 0-9, '.', '_', '-', '/'")
        return v
