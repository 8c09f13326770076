"""Register user use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.common import UserInfo
from agora.domain.error import ValidationError
from agora.domain.model import User
from agora.domain.service import CredentialService, UserService
from agora.domain.value import Email, UserId, Username


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str
    email: str
    password: str


class RegisterUserResponse(UserInfo):
    """Register user response (the created account, without password)."""


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating an account with username, email and password."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
    ) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            credential_service: Password hashing service
        """
        self.user_service = user_service
        self.credential_service = credential_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Steps:
        1. Check username, then email, against existing users
        2. Hash the password
        3. Save the new user

        Args:
            request: Registration data

        Returns:
            The created user

        Raises:
            ValidationError: If the username or email is malformed
            DuplicateFieldError: If the username or email is taken
            InternalError: If password hashing fails
        """
        try:
            username = Username(request.username)
            email = Email(request.email)
        except ValueError as e:
            raise ValidationError("Invalid username or email") from e

        with logfire.span("register_user.execute", username=username.root):
            await self.user_service.ensure_unique(username, email)

            password_hash = await self.credential_service.hash_password(
                request.password
            )

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=password_hash,
            )
            saved = await self.user_service.save(user)
            logfire.info("User registered", user_id=str(saved.id))

            return RegisterUserResponse.from_user(saved)
