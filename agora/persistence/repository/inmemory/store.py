"""Shared backing store for the in-memory repositories."""

from dataclasses import dataclass, field

from agora.domain.model import Comment, Post, User
from agora.domain.value import CommentId, PostId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    One store is shared by every repository built from it, so data written
    in one request is visible in the next.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
