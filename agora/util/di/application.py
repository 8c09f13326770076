"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.auth import LoginUseCase, RegisterUserUseCase
from agora.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentUseCase,
)
from agora.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
)
from agora.application.usecase.user import (
    DeleteUserUseCase,
    FindUserByEmailUseCase,
    GetUserProfileUseCase,
    ListUsersUseCase,
    UpdateUserProfileUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self,
        user_service: UserService,
        credential_service: CredentialService,
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service,
            credential_service=credential_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
        post_service: PostService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            credential_service=credential_service,
            jwt_service=jwt_service,
            post_service=post_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService, post_service: PostService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_find_user_by_email_use_case(
        self, user_service: UserService
    ) -> FindUserByEmailUseCase:
        """Provide find user by email use case."""
        return FindUserByEmailUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self,
        user_service: UserService,
        post_service: PostService,
        credential_service: CredentialService,
        authorization_service: AuthorizationService,
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            user_service=user_service,
            post_service=post_service,
            credential_service=credential_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(
            user_service=user_service,
            post_service=post_service,
            comment_service=comment_service,
            authorization_service=authorization_service,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        authorization_service: AuthorizationService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        authorization_service: AuthorizationService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            user_service=user_service,
            authorization_service=authorization_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )
