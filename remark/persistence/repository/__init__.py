"""Repository implementations."""

from remark.persistence.repository.user_document import (
    ObjectStoreUserDocumentRepository,
)

__all__ = [
    "ObjectStoreUserDocumentRepository",
]
