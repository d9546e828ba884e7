"""Infrastructure providers."""

# Import bases
from .storage import RepositoryProvider, StorageProvider

# Import implementations (needed for __subclasses__())
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "ProdStorageProvider",
    "RepositoryProvider",
    "StorageProvider",
]
