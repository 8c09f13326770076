"""Update user profile use case."""

from datetime import datetime, timezone
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.common import UserInfo
from agora.domain.model import UserProfilePatch
from agora.domain.service import (
    AuthorizationService,
    CredentialService,
    PostService,
    UserService,
)
from agora.domain.value import Email, PostId, UserId, Username


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Fields left as None keep their stored value.
    """

    user_id: str  # Target user, from the path
    token: str | None = None  # Bearer token from the request
    username: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, repr=False)
    slug: str | None = None
    about: str | None = Field(default=None, max_length=500)
    educational_place: str | None = None
    educational_place_url: str | None = None
    avatar_url: str | None = None
    banner_url: str | None = None
    saved_posts: list[str] = Field(default_factory=list)  # Post UUID strings

    def to_patch(self) -> UserProfilePatch:
        """Convert to the domain patch value."""
        return UserProfilePatch(
            username=Username(self.username) if self.username is not None else None,
            email=Email(self.email) if self.email is not None else None,
            password=self.password,
            slug=self.slug,
            about=self.about,
            educational_place=self.educational_place,
            educational_place_url=self.educational_place_url,
            avatar_url=self.avatar_url,
            banner_url=self.banner_url,
            saved_post_ids=tuple(PostId(UUID(p)) for p in self.saved_posts),
        )


class UpdateUserProfileResponse(UserInfo):
    """Update user profile response (the updated account, without password)."""


class UpdateUserProfileUseCase:
    """Use case for partially updating a user's own profile.

    Only the account owner may update it. The saved-posts list is replaced
    only when at least one of the submitted post IDs exists, so it cannot
    be emptied through this use case.
    """

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        credential_service: CredentialService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            credential_service: Password hashing service
            authorization_service: Ownership authorizer
        """
        self.user_service = user_service
        self.post_service = post_service
        self.credential_service = credential_service
        self.authorization_service = authorization_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Steps:
        1. Load the user, locking the row
        2. Authorize the token against the user
        3. Check username, then email, against other users
        4. Hash a new password if one was sent
        5. Reconcile saved posts
        6. Merge the remaining fields and save

        Args:
            request: Request with user ID, token and fields to update

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user does not exist
            UnauthorizedError: If the token does not belong to the user
            DuplicateFieldError: If the new username or email is taken
        """
        user_id = UserId(UUID(request.user_id))
        patch = request.to_patch()

        with logfire.span("update_user_profile.execute", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id, for_update=True)
            self.authorization_service.authorize(request.token, user.id)

            await self.user_service.ensure_unique(
                patch.username, patch.email, exclude_id=user.id
            )

            updates = patch.scalar_updates()

            if patch.password is not None:
                updates["password_hash"] = await self.credential_service.hash_password(
                    patch.password
                )

            if patch.saved_post_ids:
                requested = list(dict.fromkeys(patch.saved_post_ids))
                found = await self.post_service.find_posts_by_ids(requested)
                if found:
                    updates["saved_posts"] = tuple(post.id for post in found)
                else:
                    logfire.info(
                        "No submitted saved post exists, keeping list",
                        user_id=str(user_id),
                    )

            updates["updated_at"] = datetime.now(timezone.utc)
            saved = await self.user_service.save(user.model_copy(update=updates))
            logfire.info(
                "Profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )

            return UpdateUserProfileResponse.from_user(saved)
