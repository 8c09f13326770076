"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
)
from agora.domain.service import AuthorizationService

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    user_id: UUID
    title: str = Field(min_length=1, max_length=100)
    content: str


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authorization: str | None = Header(default=None),
) -> CreatePostResponse:
    """Create a new post owned by ``user_id``.

    Requires ``Authorization: Bearer <token>`` issued to ``user_id``.
    """
    return await create_post_use_case.execute(
        CreatePostRequest(
            user_id=str(request.user_id),
            token=AuthorizationService.bearer_token(authorization),
            title=request.title,
            content=request.content,
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post with its comments."""
    return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post, its comments and every bookmark pointing at it.

    Requires ``Authorization: Bearer <token>`` issued to the post owner.
    """
    return await delete_post_use_case.execute(
        DeletePostRequest(
            post_id=str(post_id),
            token=AuthorizationService.bearer_token(authorization),
        )
    )
