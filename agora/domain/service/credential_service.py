"""Password hashing domain service."""

import asyncio

import bcrypt
import logfire

from agora.config import AuthSettings
from agora.domain.error import InternalError

from .base import Service

# bcrypt only reads the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


def _secret_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class CredentialService(Service):
    """Domain service for password hashing and verification.

    bcrypt is CPU-bound, so both operations run in a worker thread.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize credential service.

        Args:
            auth_settings: Authentication settings (bcrypt cost factor)
        """
        self.auth_settings = auth_settings

    def _hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.auth_settings.bcrypt_rounds)
        return bcrypt.hashpw(_secret_bytes(plaintext), salt).decode("utf-8")

    async def hash_password(self, plaintext: str) -> str:
        """Hash a password with a fresh random salt.

        Args:
            plaintext: Password as typed by the user

        Returns:
            bcrypt hash string

        Raises:
            InternalError: If hashing fails
        """
        with logfire.span(
            "credential_service.hash_password",
            rounds=self.auth_settings.bcrypt_rounds,
        ):
            try:
                return await asyncio.to_thread(self._hash, plaintext)
            except (ValueError, TypeError) as e:
                logfire.error("Password hashing failed", error=type(e).__name__)
                raise InternalError("password hashing") from e

    async def verify_password(self, plaintext: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        A malformed stored hash counts as a mismatch.

        Args:
            plaintext: Candidate password
            password_hash: Stored bcrypt hash

        Returns:
            True if the password matches
        """
        with logfire.span("credential_service.verify_password"):
            try:
                matches = await asyncio.to_thread(
                    bcrypt.checkpw,
                    _secret_bytes(plaintext),
                    password_hash.encode("utf-8"),
                )
            except ValueError:
                logfire.warn("Stored password hash is malformed")
                return False
            if not matches:
                logfire.info("Password mismatch")
            return matches
