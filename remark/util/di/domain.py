"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.config import AuthSettings, CommentSettings
from remark.domain.repository import UserDocumentRepository
from remark.domain.service import (
    CommentService,
    ThreadService,
    TokenService,
    UserService,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each HTTP request gets fresh
    instances over the application-wide object store.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide bearer token domain service."""
        return TokenService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_document_repository: UserDocumentRepository
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_document_repository=user_document_repository)

    @provide
    def get_comment_service(
        self,
        user_service: UserService,
        user_document_repository: UserDocumentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            user_service=user_service,
            user_document_repository=user_document_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_thread_service(
        self,
        user_document_repository: UserDocumentRepository,
        comment_settings: CommentSettings,
    ) -> ThreadService:
        """Provide thread aggregation domain service."""
        return ThreadService(
            user_document_repository=user_document_repository,
            comment_settings=comment_settings,
        )
