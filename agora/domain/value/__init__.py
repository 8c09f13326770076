"""Domain value objects for Agora."""

from agora.domain.value.identifiers import CommentId, PostId, UserId
from agora.domain.value.types import Email, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Username",
    "Email",
]
