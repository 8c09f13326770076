"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .find_user_by_email import (
    FindUserByEmailRequest,
    FindUserByEmailResponse,
    FindUserByEmailUseCase,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .list_users import (
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UserWithContent,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "FindUserByEmailRequest",
    "FindUserByEmailResponse",
    "FindUserByEmailUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
    "UserWithContent",
]
