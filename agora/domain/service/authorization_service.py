"""Ownership authorization domain service."""

import logfire

from agora.domain.error import UnauthorizedError
from agora.domain.value import UserId
from agora.util.jwt import JWTError, TokenPayload

from .base import Service
from .jwt_service import JWTService


class AuthorizationService(Service):
    """Decides whether a token's bearer may mutate a user-owned resource.

    The only rule is ownership: the token subject must be the owner.
    Callers confirm the resource exists before asking.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    @staticmethod
    def bearer_token(authorization: str | None) -> str | None:
        """Extract the token from an ``Authorization: Bearer <token>`` header.

        Args:
            authorization: Raw header value

        Returns:
            The token, or None when the header is absent or malformed
        """
        if not authorization:
            return None
        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            return None
        return parts[1]

    def authorize(self, token: str | None, owner_id: UserId) -> TokenPayload:
        """Require that the token's subject owns the resource.

        Args:
            token: Bearer token (None if the request carried none)
            owner_id: Owner of the resource being mutated

        Returns:
            The verified token payload

        Raises:
            UnauthorizedError: If the token is missing, invalid, expired,
                or issued to another user
        """
        with logfire.span("authorization_service.authorize", owner_id=str(owner_id)):
            if not token:
                logfire.warn("Authorization without token", owner_id=str(owner_id))
                raise UnauthorizedError("Token not provided", "token_missing")

            try:
                payload = self.jwt_service.verify_token(token)
            except JWTError as e:
                raise UnauthorizedError(str(e), "token_invalid") from e

            if payload.id != str(owner_id):
                logfire.warn(
                    "Token subject does not own resource",
                    subject=payload.id,
                    owner_id=str(owner_id),
                )
                raise UnauthorizedError()

            return payload
