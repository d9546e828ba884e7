"""Storage infrastructure providers."""

from dishka import Scope, provide
import logfire

from remark.config import StorageSettings
from remark.domain.repository import UserDocumentRepository
from remark.persistence.repository import ObjectStoreUserDocumentRepository
from remark.persistence.store import ObjectStore, S3ObjectStore, create_s3_client
from remark.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Object store component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using an S3-compatible bucket."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_object_store(self, settings: StorageSettings) -> ObjectStore:
        """Provide S3 object store (one client per process)."""
        store = S3ObjectStore(client=create_s3_client(settings), bucket=settings.bucket)
        logfire.info(
            "S3 object store configured",
            bucket=settings.bucket,
            endpoint_url=settings.endpoint_url,
        )
        return store


class RepositoryProvider(ProviderBase):
    """Repository provider - concrete, works over whichever store is provided."""

    @provide(scope=Scope.REQUEST)
    def get_user_document_repository(
        self, store: ObjectStore, settings: StorageSettings
    ) -> UserDocumentRepository:
        """Provide UserDocument repository."""
        return ObjectStoreUserDocumentRepository(
            store=store,
            prefix=settings.prefix,
            conditional_writes=settings.conditional_writes,
        )
