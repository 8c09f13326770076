"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CommentInfo
from agora.domain.service import CommentService, PostService, UserService
from agora.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    user_id: str  # Author UUID string
    content: str


class CreateCommentResponse(CommentInfo):
    """Create comment response."""


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists
        2. Verify author exists
        3. Create comment

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or the author does not exist
        """
        post = await self.post_service.get_by_id(PostId(UUID(request.post_id)))
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        comment = await self.comment_service.create_comment(
            post_id=post.id,
            user_id=user.id,
            content=request.content,
        )
        return CreateCommentResponse.from_comment(comment)
