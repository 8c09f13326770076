"""User aggregate root.

Users register with a username, email and password, own posts and comments,
and keep an ordered list of bookmarked (saved) posts.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import Email, PostId, UserId, Username
from agora.domain.value.common import ValueObject


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` stays inside the domain: response models are built
    field by field and never include it.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    slug: str = ""
    about: str = Field(default="", max_length=500)
    educational_place: str = ""
    educational_place_url: str = ""
    avatar_url: str = ""
    banner_url: str = ""
    saved_posts: tuple[PostId, ...] = ()
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class UserProfilePatch(ValueObject):
    """Partial profile update.

    A field left as None is absent and keeps its stored value.
    ``password`` is plaintext and ``saved_post_ids`` are unresolved ids;
    both need services to be applied, so they are not part of
    ``scalar_updates()``.
    """

    username: Username | None = None
    email: Email | None = None
    password: str | None = Field(default=None, repr=False)
    slug: str | None = None
    about: str | None = Field(default=None, max_length=500)
    educational_place: str | None = None
    educational_place_url: str | None = None
    avatar_url: str | None = None
    banner_url: str | None = None
    saved_post_ids: tuple[PostId, ...] = ()

    def scalar_updates(self) -> dict[str, Any]:
        """Return the present plain fields, ready for ``model_copy(update=...)``."""
        return {
            name: getattr(self, name)
            for name in (
                "username",
                "email",
                "slug",
                "about",
                "educational_place",
                "educational_place_url",
                "avatar_url",
                "banner_url",
            )
            if getattr(self, name) is not None
        }
