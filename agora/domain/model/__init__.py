"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.post import Post
from agora.domain.model.user import User, UserProfilePatch

__all__ = [
    "User",
    "UserProfilePatch",
    "Post",
    "Comment",
]
