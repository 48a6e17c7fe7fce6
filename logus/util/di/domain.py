"""Domain layer DI providers."""

from dishka import Scope, provide

from logus.config import AuthSettings
from logus.domain.repository import CommentRepository, UserRepository
from logus.domain.service import CommentService, JWTService, UserService
from logus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle: each HTTP request gets fresh services sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, user_service: UserService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, user_service=user_service
        )
