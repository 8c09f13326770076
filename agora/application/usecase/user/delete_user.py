"""Delete user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.common import PostInfo, UserInfo
from agora.domain.service import (
    AuthorizationService,
    CommentService,
    PostService,
    UserService,
)
from agora.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str
    token: str | None = None


class DeleteUserResponse(BaseModel):
    """The deleted user as it was loaded, with its posts."""

    user: UserInfo
    posts: list[PostInfo]


class DeleteUserUseCase(BaseUseCase):
    """Use case for deleting a user together with everything they own.

    All steps share the request transaction: either the user and all
    dependent rows are gone, or nothing changed.
    """

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            comment_service: Comment domain service
            authorization_service: Ownership authorizer
        """
        self.user_service = user_service
        self.post_service = post_service
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute cascade delete.

        Steps:
        1. Load the user (locked) and their posts
        2. Authorize the token against the user
        3. Delete comments on the user's posts and comments by the user
        4. Remove the user's posts from every saved-posts list
        5. Delete the user's posts
        6. Delete the user

        Args:
            request: Request with user ID and token

        Returns:
            The user and posts as they were before deletion

        Raises:
            NotFoundError: If the user does not exist
            UnauthorizedError: If the token does not belong to the user
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_user.execute", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id, for_update=True)
            posts = await self.post_service.find_by_user(user.id)

            self.authorization_service.authorize(request.token, user.id)

            post_ids = [post.id for post in posts]
            await self.comment_service.delete_for_user(user.id, post_ids)
            await self.user_service.remove_saved_posts(post_ids)
            await self.post_service.delete_by_user(user.id)
            await self.user_service.delete(user.id)

            logfire.info(
                "User deleted with content", user_id=str(user_id), posts=len(posts)
            )

            return DeleteUserResponse(
                user=UserInfo.from_user(user),
                posts=[PostInfo.from_post(post) for post in posts],
            )
