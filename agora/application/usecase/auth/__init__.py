"""Authentication use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]
