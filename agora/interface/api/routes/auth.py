"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import AliasChoices, BaseModel, Field

from agora.application.usecase.auth import LoginRequest, LoginResponse, LoginUseCase

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for password login.

    The identifier may be sent as ``identifier``, ``email`` or ``username``;
    it is matched against both columns either way.
    """

    identifier: str = Field(
        min_length=1,
        validation_alias=AliasChoices("identifier", "email", "username"),
    )
    password: str = Field(min_length=1)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Log in with email or username and password.

    Args:
        request: Credentials
        login_use_case: Login use case from DI

    Returns:
        Bearer token (valid 60 days), the user and their saved posts

    Example:
        POST /auth/login
        {"email": "ana@x.com", "password": "abc12345"}

        Response:
        {
            "token": "eyJ...",
            "user": {"id": "...", "username": "ana", ...},
            "saved_posts": []
        }
    """
    return await login_use_case.execute(
        LoginRequest(identifier=request.identifier, password=request.password)
    )
