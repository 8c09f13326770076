"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
)

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    user_id: UUID
    content: str = Field(min_length=1)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a post.

    The post and the author must both exist (404 otherwise).
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            user_id=str(request.user_id),
            content=request.content,
        )
    )


@router.get("/comments/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a comment with its author."""
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=str(comment_id))
    )
