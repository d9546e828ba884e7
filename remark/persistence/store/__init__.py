"""Object store implementations."""

from .base import (
    ObjectPage,
    ObjectStore,
    PreconditionFailedError,
    StoredObject,
    StoreError,
)
from .inmemory import InMemoryObjectStore
from .s3 import S3ObjectStore, create_s3_client

__all__ = [
    "InMemoryObjectStore",
    "ObjectPage",
    "ObjectStore",
    "PreconditionFailedError",
    "S3ObjectStore",
    "StoredObject",
    "StoreError",
    "create_s3_client",
]
