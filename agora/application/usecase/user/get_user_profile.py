"""Get user profile use case."""

from pydantic import BaseModel

from agora.application.usecase.common import CommentInfo, PostInfo, UserInfo
from agora.domain.error import NotFoundError
from agora.domain.service import PostService, UserService
from agora.domain.value import Username


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class GetUserProfileResponse(BaseModel):
    """User profile with owned posts, saved posts and comments."""

    user: UserInfo
    posts: list[PostInfo]
    saved_posts: list[PostInfo]
    comments: list[CommentInfo]


class GetUserProfileUseCase:
    """Use case for getting a public user profile by username."""

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
        """
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Request with username

        Returns:
            User profile information

        Raises:
            NotFoundError: If no user has this username
        """
        try:
            username = Username(request.username)
        except ValueError:
            # No stored user can hold a username of invalid length
            raise NotFoundError("User", request.username)

        user = await self.user_service.get_by_username(username)
        [content] = await self.user_service.load_content([user])
        saved_posts = await self.post_service.find_posts_by_ids(list(user.saved_posts))

        return GetUserProfileResponse(
            user=UserInfo.from_user(user),
            posts=[PostInfo.from_post(post) for post in content.posts],
            saved_posts=[PostInfo.from_post(post) for post in saved_posts],
            comments=[CommentInfo.from_comment(c) for c in content.comments],
        )
