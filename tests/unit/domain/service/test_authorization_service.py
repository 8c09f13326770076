"""Unit tests for AuthorizationService."""

from uuid import uuid4

import pytest

from agora.config import AuthSettings
from agora.domain.error import UnauthorizedError
from agora.domain.service import AuthorizationService, JWTService
from agora.domain.value import UserId


@pytest.fixture
def jwt_service(auth_settings) -> JWTService:
    return JWTService(auth_settings)


@pytest.fixture
def authorization_service(jwt_service) -> AuthorizationService:
    return AuthorizationService(jwt_service)


class TestAuthorize:
    """Tests for AuthorizationService.authorize()."""

    def test_owner_is_authorized(self, jwt_service, authorization_service):
        """Should return the payload when the subject owns the resource."""
        # Arrange
        owner_id = UserId(uuid4())
        token = jwt_service.create_token(str(owner_id), "ana")

        # Act
        payload = authorization_service.authorize(token, owner_id)

        # Assert
        assert payload.id == str(owner_id)

    def test_missing_token(self, authorization_service):
        """Should fail when no token was sent."""
        # Act / Assert
        with pytest.raises(UnauthorizedError) as exc_info:
            authorization_service.authorize(None, UserId(uuid4()))

        assert exc_info.value.message_key == "token_missing"

    def test_invalid_token(self, authorization_service):
        """Should fail when the token does not verify."""
        # Act / Assert
        with pytest.raises(UnauthorizedError) as exc_info:
            authorization_service.authorize("garbage", UserId(uuid4()))

        assert exc_info.value.message_key == "token_invalid"

    def test_expired_token(self, authorization_service):
        """Should fail when the token has expired."""
        # Arrange
        owner_id = UserId(uuid4())
        expired = JWTService(
            AuthSettings(jwt_secret="unit-test-secret", jwt_expiry_days=-1)
        ).create_token(str(owner_id), "ana")

        # Act / Assert
        with pytest.raises(UnauthorizedError) as exc_info:
            authorization_service.authorize(expired, owner_id)

        assert exc_info.value.message_key == "token_invalid"

    def test_other_users_token(self, jwt_service, authorization_service):
        """Should fail when the token belongs to someone else."""
        # Arrange
        token = jwt_service.create_token(str(uuid4()), "bruno")

        # Act / Assert
        with pytest.raises(UnauthorizedError) as exc_info:
            authorization_service.authorize(token, UserId(uuid4()))

        assert exc_info.value.message_key == "unauthorized"
        assert exc_info.value.http_status == 401


class TestBearerToken:
    """Tests for AuthorizationService.bearer_token()."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc", "abc"),
            (None, None),
            ("", None),
            ("Basic dXNlcjpwYXNz", None),
            ("Bearer", None),
            ("Bearer a b", None),
        ],
    )
    def test_extracts_token(self, header, expected):
        """Should return the token only for well-formed Bearer headers."""
        assert AuthorizationService.bearer_token(header) == expected
