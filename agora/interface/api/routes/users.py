"""User routes: registration, listing, profiles, update and deletion."""

import re
from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from email_validator import validate_email
from fastapi import APIRouter, Header, status
from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    Field,
    StringConstraints,
    field_validator,
)

from agora.application.usecase.auth import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from agora.application.usecase.common import UserInfo
from agora.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    FindUserByEmailRequest,
    FindUserByEmailUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from agora.domain.service import AuthorizationService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

# Registration only requires a username; profile updates enforce 4-20
NewUsernameField = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)
]
UsernameField = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=4, max_length=20)
]

_HAS_LETTER = re.compile(r"[A-Za-z]")
_HAS_DIGIT = re.compile(r"\d")


def check_email(value: str) -> str:
    """Validate email syntax, returning the address exactly as sent.

    Lookups compare emails as stored, so the normalized form is discarded.
    """
    validate_email(value, check_deliverability=False)
    return value


EmailField = Annotated[str, AfterValidator(check_email)]
PasswordField = Annotated[str, StringConstraints(strip_whitespace=True)]


def check_password(value: str) -> str:
    """At least 8 characters with at least one letter and one digit."""
    if len(value) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not (_HAS_LETTER.search(value) and _HAS_DIGIT.search(value)):
        raise ValueError("Password must contain letters and numbers")
    return value


class RegisterUserAPIRequest(BaseModel):
    """API request for creating an account."""

    username: NewUsernameField
    email: EmailField
    password: str = Field(min_length=1, repr=False)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for a partial profile update. Omitted fields are kept."""

    username: UsernameField | None = None
    email: EmailField | None = None
    password: PasswordField | None = Field(default=None, repr=False)
    slug: str | None = Field(default=None, max_length=255)
    about: str | None = Field(default=None, max_length=500)
    educational_place: str | None = None
    educational_place_url: str | None = None
    avatar_url: str | None = None
    banner_url: str | None = None
    saved_post_ids: list[UUID] = Field(
        default_factory=list,
        validation_alias=AliasChoices("saved_post_ids", "saved_posts"),
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        return check_password(v) if v is not None else None


@router.post(
    "", response_model=RegisterUserResponse, status_code=status.HTTP_201_CREATED
)
async def register_user(
    request: RegisterUserAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Create an account.

    Returns:
        The created user (never includes the password)

    Example:
        POST /users
        {"username": "ana", "email": "ana@x.com", "password": "abc12345"}
    """
    return await register_user_use_case.execute(
        RegisterUserRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.get("", response_model=ListUsersResponse | UserInfo | None)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    find_user_by_email_use_case: FromDishka[FindUserByEmailUseCase],
    email: str | None = None,
) -> ListUsersResponse | UserInfo | None:
    """List users by popularity, or look one up by email.

    Without ``email``: every user with posts and comments, ordered by the
    highest points among their posts (users without posts last).

    With ``?email=``: the user with exactly that email, or ``null``.
    """
    if email is not None:
        result = await find_user_by_email_use_case.execute(
            FindUserByEmailRequest(email=email)
        )
        return result.user

    return await list_users_use_case.execute(ListUsersRequest())


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user profile by username.

    Includes the user's posts, saved posts and comments.
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=username)
    )


@router.patch("/{user_id}", response_model=UpdateUserProfileResponse)
async def update_user_profile(
    user_id: UUID,
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateUserProfileResponse:
    """Partially update the caller's own profile.

    Requires ``Authorization: Bearer <token>`` issued to ``user_id``.

    Example:
        PATCH /users/3f0c...
        Authorization: Bearer eyJ...
        {"about": "Physics student", "saved_post_ids": ["9a1e..."]}
    """
    fields = request.model_dump(exclude={"saved_post_ids"}, exclude_none=True)

    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=str(user_id),
            token=AuthorizationService.bearer_token(authorization),
            saved_posts=[str(post_id) for post_id in request.saved_post_ids],
            **fields,
        )
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    authorization: str | None = Header(default=None),
) -> DeleteUserResponse:
    """Delete the caller's own account with all posts and comments.

    Requires ``Authorization: Bearer <token>`` issued to ``user_id``.

    Returns:
        The deleted user and posts as they were before deletion
    """
    return await delete_user_use_case.execute(
        DeleteUserRequest(
            user_id=str(user_id),
            token=AuthorizationService.bearer_token(authorization),
        )
    )
