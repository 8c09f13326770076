"""Comment entity.

A comment (reply) is attached to one post and authored by one user. Both
references are validated when the comment is created.
"""

from datetime import datetime, timezone

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_id: PostId
    user_id: UserId
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
