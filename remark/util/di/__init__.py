"""Dependency injection for remark.

Scopes: settings and the object store live for the whole process (APP);
the document repository, domain services and use cases are built per
request (REQUEST).
"""

from typing import Type

from remark.util.di.application import ProdApplicationProvider
from remark.util.di.base import Component, ProviderBase
from remark.util.di.core import ProdConfigProvider
from remark.util.di.domain import ProdDomainProvider
from remark.util.di.infrastructure import (
    ProdStorageProvider,
    RepositoryProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    RepositoryProvider,
    # Swappable: S3 in production, in-memory in tests
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one entry of ``PROVIDERS``.

    Entries without subclasses are returned unchanged. For a swappable
    entry, the subclass whose ``__is_mock__`` equals ``use_mock`` is chosen;
    the in-memory storage provider only exists once ``tests.di`` has been
    imported.

    Raises:
        ValueError: If no subclass of the requested kind is registered
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for candidate in subclasses:
        if getattr(candidate, "__is_mock__", False) == use_mock:
            return candidate

    kind = "in-memory" if use_mock else "production"
    component_name = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} provider registered for {component_name}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "RepositoryProvider",
    "StorageProvider",
    "ProdStorageProvider",
]
