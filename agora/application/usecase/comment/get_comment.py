"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CommentInfo, UserInfo
from agora.domain.service import CommentService, UserService
from agora.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str


class GetCommentResponse(BaseModel):
    """A comment with its author."""

    comment: CommentInfo
    user: UserInfo


class GetCommentUseCase:
    """Use case for getting a comment and its author."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_by_id(
            CommentId(UUID(request.comment_id))
        )
        user = await self.user_service.get_by_id(comment.user_id)

        return GetCommentResponse(
            comment=CommentInfo.from_comment(comment),
            user=UserInfo.from_user(user),
        )
