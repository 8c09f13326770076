"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostInfo
from agora.domain.service import (
    AuthorizationService,
    CommentService,
    PostService,
    UserService,
)
from agora.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    token: str | None = None


class DeletePostResponse(PostInfo):
    """The deleted post."""


class DeletePostUseCase:
    """Use case for deleting a single post owned by the caller."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service (saved-posts cleanup)
            authorization_service: Ownership authorizer
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Load the post
        2. Authorize the token against the post owner
        3. Delete its comments and drop it from saved-posts lists
        4. Delete the post

        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If the token does not belong to the owner
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("delete_post.execute", post_id=str(post_id)):
            post = await self.post_service.get_by_id(post_id)
            self.authorization_service.authorize(request.token, post.user_id)

            await self.comment_service.delete_for_post(post.id)
            await self.user_service.remove_saved_posts([post.id])
            await self.post_service.delete(post.id)

            return DeletePostResponse.from_post(post)
