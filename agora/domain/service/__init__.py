"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .credential_service import CredentialService
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserContent, UserService

__all__ = [
    "AuthorizationService",
    "CommentService",
    "CredentialService",
    "JWTService",
    "PostService",
    "Service",
    "UserContent",
    "UserService",
]
