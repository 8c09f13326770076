"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CommentInfo, PostInfo
from agora.domain.service import CommentService, PostService
from agora.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """A post with its comments, oldest first."""

    post: PostInfo
    comments: list[CommentInfo]


class GetPostUseCase:
    """Use case for getting a post by ID."""

    def __init__(self, post_service: PostService, comment_service: CommentService):
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_by_id(PostId(UUID(request.post_id)))
        comments = await self.comment_service.find_by_post(post.id)

        return GetPostResponse(
            post=PostInfo.from_post(post),
            comments=[CommentInfo.from_comment(c) for c in comments],
        )
