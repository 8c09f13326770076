"""Post aggregate root.

Posts are owned by exactly one user. The owner never changes after creation.
"""

from datetime import datetime, timezone

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``points`` drives the popularity ordering of the user listing.
    """

    id: PostId
    user_id: UserId
    title: str = Field(min_length=1, max_length=100)
    content: str
    points: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
