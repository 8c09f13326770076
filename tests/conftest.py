"""Test configuration and fixtures."""

import os

# Settings are read from the environment when the app module is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-do-not-use-in-production")
# Minimum bcrypt cost keeps hashing fast in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402
import pytest  # noqa: E402

from agora.config import AuthSettings  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed secret and the cheapest bcrypt cost."""
    return AuthSettings(jwt_secret="unit-test-secret", bcrypt_rounds=4)
