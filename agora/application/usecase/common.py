"""Response models shared by several use cases.

Each model is built field by field from a domain model. ``UserInfo`` has
no password field, so a password hash can never reach a response.
"""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import Comment, Post, User


class UserInfo(BaseModel):
    """Public user representation."""

    id: str
    username: str
    email: str
    slug: str
    about: str
    educational_place: str
    educational_place_url: str
    avatar_url: str
    banner_url: str
    saved_post_ids: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            slug=user.slug,
            about=user.about,
            educational_place=user.educational_place,
            educational_place_url=user.educational_place_url,
            avatar_url=user.avatar_url,
            banner_url=user.banner_url,
            saved_post_ids=[str(post_id) for post_id in user.saved_posts],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PostInfo(BaseModel):
    """Post representation."""

    id: str
    user_id: str
    title: str
    content: str
    points: int
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostInfo":
        return cls(
            id=str(post.id),
            user_id=str(post.user_id),
            title=post.title,
            content=post.content,
            points=post.points,
            created_at=post.created_at,
        )


class CommentInfo(BaseModel):
    """Comment representation."""

    id: str
    post_id: str
    user_id: str
    content: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentInfo":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            user_id=str(comment.user_id),
            content=comment.content,
            created_at=comment.created_at,
        )
