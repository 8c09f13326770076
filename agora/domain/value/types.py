"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re

from pydantic import field_validator

from agora.domain.value.common import RootValueObject

# Loose syntactic check; the API layer validates addresses strictly
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Username(RootValueObject[str]):
    """Public, unique account name.

    1-20 characters as stored. Profile updates require 4-20 at the API
    layer. Uniqueness is case-sensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        if not v or len(v) > 20:
            raise ValueError("Username must be 1-20 characters")
        return v


class Email(RootValueObject[str]):
    """Unique account email address, compared exactly as stored."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email syntax."""
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v
