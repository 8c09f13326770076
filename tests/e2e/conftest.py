"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from agora.interface.api.app import create_app
from agora.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container.

    Storage is in memory and shared by every request of one test.
    """
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def register(client):
    """Register a user, returning the created user JSON."""

    def _register(username: str, email: str | None = None, password="abc12345"):
        response = client.post(
            "/users",
            json={
                "username": username,
                "email": email or f"{username}@x.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def login(client):
    """Log in, returning the bearer header for the session."""

    def _login(identifier: str, password: str = "abc12345") -> dict[str, str]:
        response = client.post(
            "/auth/login", json={"identifier": identifier, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
