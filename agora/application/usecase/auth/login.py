"""Login use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostInfo, UserInfo
from agora.domain.error import InvalidCredentialsError
from agora.domain.service import (
    CredentialService,
    JWTService,
    PostService,
    UserService,
)


class LoginRequest(BaseModel):
    """Login request.

    ``identifier`` is matched against both email and username.
    """

    identifier: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserInfo
    saved_posts: list[PostInfo]


class LoginUseCase:
    """Use case for password login."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
        post_service: PostService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            credential_service: Password verification service
            jwt_service: JWT token domain service
            post_service: Post domain service (saved posts)
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.jwt_service = jwt_service
        self.post_service = post_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Find user by email or username
        2. Verify password
        3. Issue token
        4. Resolve the user's saved posts

        Args:
            request: Login credentials

        Returns:
            Token, user and saved posts

        Raises:
            InvalidCredentialsError: If the user is unknown or the password
                is wrong
        """
        with logfire.span("login.execute"):
            user = await self.user_service.find_by_login(request.identifier)
            if user is None:
                logfire.warn("Login failed: unknown identifier")
                raise InvalidCredentialsError()

            if not await self.credential_service.verify_password(
                request.password, user.password_hash
            ):
                logfire.warn("Login failed: wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(str(user.id), user.username.root)
            saved_posts = await self.post_service.find_posts_by_ids(
                list(user.saved_posts)
            )
            logfire.info("User logged in", user_id=str(user.id))

            return LoginResponse(
                token=token,
                user=UserInfo.from_user(user),
                saved_posts=[PostInfo.from_post(post) for post in saved_posts],
            )
