"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from agora.config import AuthSettings
from agora.domain.service import JWTService
from agora.util.jwt import JWTError


class TestJWTService:
    """Tests for token issuance and verification."""

    def test_round_trip_preserves_identity(self, auth_settings):
        """Should return the id and username the token was issued for."""
        # Arrange
        service = JWTService(auth_settings)
        user_id = str(uuid4())

        # Act
        token = service.create_token(user_id, "ana")
        payload = service.verify_token(token)

        # Assert
        assert payload.id == user_id
        assert payload.username == "ana"

    def test_expires_after_sixty_days(self, auth_settings):
        """Should set expiry 60 days after issuance."""
        # Arrange
        service = JWTService(auth_settings)
        issued = datetime.now(timezone.utc)

        # Act
        payload = service.verify_token(service.create_token(str(uuid4()), "ana"))

        # Assert
        delta = payload.exp - issued
        assert timedelta(days=59, hours=23) < delta <= timedelta(days=60, minutes=1)

    def test_tampered_signature_is_rejected(self, auth_settings):
        """Should reject a token whose signature was altered."""
        # Arrange
        service = JWTService(auth_settings)
        token = service.create_token(str(uuid4()), "ana")
        header, payload, signature = token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

        # Act / Assert
        with pytest.raises(JWTError):
            service.verify_token(f"{header}.{payload}.{flipped}")

    def test_other_secret_is_rejected(self, auth_settings):
        """Should reject a token signed with another key."""
        # Arrange
        service = JWTService(auth_settings)
        foreign = JWTService(AuthSettings(jwt_secret="someone-else"))
        token = foreign.create_token(str(uuid4()), "ana")

        # Act / Assert
        with pytest.raises(JWTError, match="Invalid token"):
            service.verify_token(token)

    def test_expired_token_is_rejected(self):
        """Should reject a token past its expiry."""
        # Arrange
        service = JWTService(AuthSettings(jwt_secret="s", jwt_expiry_days=-1))
        token = service.create_token(str(uuid4()), "ana")

        # Act / Assert
        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_payload_without_identity_is_rejected(self, auth_settings):
        """Should reject a correctly signed token missing required claims."""
        # Arrange
        service = JWTService(auth_settings)
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(days=1)},
            auth_settings.jwt_secret,
            algorithm="HS256",
        )

        # Act / Assert
        with pytest.raises(JWTError, match="Malformed"):
            service.verify_token(token)

    def test_garbage_is_rejected(self, auth_settings):
        """Should reject strings that are not JWTs."""
        # Arrange
        service = JWTService(auth_settings)

        # Act / Assert
        with pytest.raises(JWTError):
            service.verify_token("not-a-token")
