"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings
from agora.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from agora.domain.service import (
    AuthorizationService,
    CommentService,
    CredentialService,
    JWTService,
    PostService,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_credential_service(self, auth_settings: AuthSettings) -> CredentialService:
        """Provide password hashing service (stateless)."""
        return CredentialService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless)."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_authorization_service(
        self, jwt_service: JWTService
    ) -> AuthorizationService:
        """Provide ownership authorizer."""
        return AuthorizationService(jwt_service=jwt_service)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )
