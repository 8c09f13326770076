"""List users use case."""

from pydantic import BaseModel

from agora.application.usecase.common import CommentInfo, PostInfo, UserInfo
from agora.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request (no parameters)."""


class UserWithContent(BaseModel):
    """A user with their posts and comments."""

    user: UserInfo
    posts: list[PostInfo]
    comments: list[CommentInfo]


class ListUsersResponse(BaseModel):
    """Users ordered by popularity."""

    users: list[UserWithContent]


class ListUsersUseCase:
    """Use case for listing every user, most popular first.

    Popularity is the highest points among a user's posts; users without
    posts come last.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Args:
            request: Empty request

        Returns:
            Ordered users with their content
        """
        entries = await self.user_service.list_by_popularity()

        return ListUsersResponse(
            users=[
                UserWithContent(
                    user=UserInfo.from_user(entry.user),
                    posts=[PostInfo.from_post(post) for post in entry.posts],
                    comments=[CommentInfo.from_comment(c) for c in entry.comments],
                )
                for entry in entries
            ]
        )
