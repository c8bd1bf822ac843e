"""Unit tests for registration, login, account and admin HTTP routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from community.application.services import ContentService, UserService
from community.application.services.user_service import AccessToken
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Profile, User
from community.domain.value_objects import AccountStatus, UserId
from community.ports.exceptions import DuplicateLoginError, ProfileNotFoundError
from shared_kernel.exceptions import (
    NotAuthenticatedError,
    PermissionDeniedError,
    ValidationError,
)


@pytest.fixture
def mock_user_service() -> AsyncMock:
    """Mock UserService for testing."""
    return AsyncMock(spec=UserService)


@pytest.fixture
def mock_content_service() -> AsyncMock:
    return AsyncMock(spec=ContentService)


@pytest.fixture
def test_client(
    mock_user_service: AsyncMock,
    mock_content_service: AsyncMock,
    alice: CurrentUser,
) -> TestClient:
    """Create TestClient with mocked dependencies."""
    from community.dependencies.authentication import get_current_user
    from community.dependencies.services import get_content_service, get_user_service
    from community.presentation import router

    app = FastAPI()

    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    app.dependency_overrides[get_content_service] = lambda: mock_content_service
    app.dependency_overrides[get_current_user] = lambda: alice

    app.include_router(router)

    return TestClient(app)


def _user(login: str = "ada") -> User:
    return User.register(login=login, password_hash="$2b$12$hash", name="Ada")


class TestRegister:
    def test_register_returns_201_without_credential(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        user = _user()
        mock_user_service.register.return_value = user

        response = test_client.post(
            "/auth/register",
            json={"login": "Ada", "password": "s3cret", "name": "Ada"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["login"] == "ada"
        assert body["is_mentor"] is False
        assert "password" not in body
        assert "password_hash" not in body

    def test_duplicate_login_returns_409(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = DuplicateLoginError(
            "Login 'ada' is already taken"
        )

        response = test_client.post(
            "/auth/register",
            json={"login": "ada", "password": "pw", "name": "Ada"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_blank_password_returns_400(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = ValidationError(
            "Password cannot be empty"
        )

        response = test_client.post(
            "/auth/register", json={"login": "ada", "password": "", "name": "Ada"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestLogin:
    def test_login_returns_bearer_token(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        user = _user()
        mock_user_service.authenticate.return_value = AccessToken(
            token="jwt", expires_in=3600, user=user
        )

        response = test_client.post(
            "/auth/login", json={"login": "ada", "password": "s3cret"}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["access_token"] == "jwt"
        assert body["token_type"] == "bearer"
        assert body["user"]["id"] == user.id.value
        mock_user_service.authenticate.assert_called_once_with(
            login="ada", password="s3cret"
        )

    def test_bad_credentials_return_401_with_challenge(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.authenticate.side_effect = NotAuthenticatedError(
            "invalid login or password"
        )

        response = test_client.post(
            "/auth/login", json={"login": "ada", "password": "wrong"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"

    def test_logout_returns_204(self, test_client: TestClient) -> None:
        response = test_client.post("/auth/logout")

        assert response.status_code == status.HTTP_204_NO_CONTENT


class TestMe:
    def test_get_me(
        self, test_client: TestClient, mock_user_service: AsyncMock, alice
    ) -> None:
        mock_user_service.get_user.return_value = User(
            id=alice.user_id, login="alice", password_hash="h", name="Alice"
        )

        response = test_client.get("/users/me")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == alice.user_id.value
        mock_user_service.get_user.assert_called_once_with(alice.user_id)

    def test_feed_is_empty_without_groups(
        self, test_client: TestClient, mock_content_service: AsyncMock, alice
    ) -> None:
        mock_content_service.feed_for_user.return_value = []
        mock_content_service.authors_of.return_value = {}

        response = test_client.get("/users/me/feed")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []
        mock_content_service.feed_for_user.assert_called_once_with(alice)

    def test_profile_of_unknown_user(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.get_profile.side_effect = ProfileNotFoundError("missing")

        response = test_client.get(f"/users/{UserId.generate().value}/profile")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_profile_response(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        user_id = UserId.generate()
        profile = Profile.for_user(user_id=user_id, name="Erin")
        profile.edit(bio="hello")
        mock_user_service.get_profile.return_value = profile

        response = test_client.get(f"/users/{user_id.value}/profile")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["bio"] == "hello"


class TestAdminRoutes:
    def test_non_admin_gets_403(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.list_reported_users.side_effect = PermissionDeniedError(
            "admin privileges required"
        )

        response = test_client.get("/admin/users/reported")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_ban_user(
        self, test_client: TestClient, mock_user_service: AsyncMock, alice
    ) -> None:
        user = _user("troll")
        user.change_status(AccountStatus.BANNED)
        mock_user_service.update_account_status.return_value = user

        response = test_client.patch(
            f"/admin/users/{user.id.value}/status", json={"status": "banned"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "banned"
        mock_user_service.update_account_status.assert_called_once_with(
            user.id, AccountStatus.BANNED, alice
        )

    def test_grant_mentor(
        self, test_client: TestClient, mock_user_service: AsyncMock, alice
    ) -> None:
        user = _user("grace")
        user.is_mentor = True
        mock_user_service.set_mentor_eligibility.return_value = user

        response = test_client.patch(
            f"/admin/users/{user.id.value}/mentor", json={"is_mentor": True}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["is_mentor"] is True
