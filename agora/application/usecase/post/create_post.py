"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostInfo
from agora.domain.service import AuthorizationService, PostService, UserService
from agora.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: str  # Owner; must match the token subject
    token: str | None = None
    title: str
    content: str


class CreatePostResponse(PostInfo):
    """Create post response."""


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            authorization_service: Ownership authorizer
        """
        self.post_service = post_service
        self.user_service = user_service
        self.authorization_service = authorization_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load the owner (via UserService)
        2. Authorize the token against the owner
        3. Create the post with zero points

        Args:
            request: Create post request

        Returns:
            Created post

        Raises:
            NotFoundError: If the owner does not exist
            UnauthorizedError: If the token does not belong to the owner
        """
        user_id = UserId(UUID(request.user_id))
        user = await self.user_service.get_by_id(user_id)

        with logfire.span("create_post.execute", user_id=str(user_id)):
            self.authorization_service.authorize(request.token, user.id)
            post = await self.post_service.create_post(
                user.id, request.title, request.content
            )
            return CreatePostResponse.from_post(post)
