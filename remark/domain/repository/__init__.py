"""Repository interfaces for the remark domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from remark.domain.repository.user_document import (
    UsernamePage,
    UserDocumentRepository,
)

__all__ = [
    "UserDocumentRepository",
    "UsernamePage",
]
