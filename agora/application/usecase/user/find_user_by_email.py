"""Find user by email use case."""

from pydantic import BaseModel

from agora.application.usecase.common import UserInfo
from agora.domain.service import UserService
from agora.domain.value import Email


class FindUserByEmailRequest(BaseModel):
    """Find user by email request."""

    email: str


class FindUserByEmailResponse(BaseModel):
    """The user with this exact email, or None."""

    user: UserInfo | None


class FindUserByEmailUseCase:
    """Use case for looking up a single user by exact email."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: FindUserByEmailRequest) -> FindUserByEmailResponse:
        """Execute lookup.

        An address that is not syntactically valid cannot match anyone.
        """
        try:
            email = Email(request.email)
        except ValueError:
            return FindUserByEmailResponse(user=None)

        user = await self.user_service.find_by_email(email)
        return FindUserByEmailResponse(
            user=UserInfo.from_user(user) if user else None
        )
