"""End-to-end tests for the account flow."""

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


class TestAuthFlow:
    """Register, log in, read the profile and change the password."""

    def test_register_login_and_me(self, client):
        """A registered user can log in and fetch their profile."""
        # Act
        registered = client.post(
            "/auth/register",
            json={"name": "Alice", "email": "alice@example.com", "password": "secret1"},
        )
        login = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "secret1"}
        )
        token = login.json()["token"]
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert registered.status_code == 201
        assert "password_hash" not in registered.json()["user"]
        assert login.status_code == 200
        assert me.status_code == 200
        assert me.json()["email"] == "alice@example.com"

    def test_wrong_password_is_401(self, client):
        """Bad credentials are unauthorized."""
        client.post(
            "/auth/register",
            json={"name": "Alice", "email": "alice@example.com", "password": "secret1"},
        )

        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "nope"}
        )

        assert response.status_code == 401

    def test_duplicate_registration_is_400(self, client):
        """The same email cannot register twice."""
        body = {"name": "Alice", "email": "alice@example.com", "password": "secret1"}
        client.post("/auth/register", json=body)

        response = client.post("/auth/register", json=body)

        assert response.status_code == 400

    def test_me_without_token_is_401(self, client):
        """Should return 401 when not authenticated."""
        response = client.get("/auth/me")

        assert response.status_code == 401

    def test_health(self, client):
        """Health check needs no auth."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
