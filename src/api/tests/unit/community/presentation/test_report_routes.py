"""Unit tests for report and notification HTTP routes."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from community.application.services import NotificationService, ReportService
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Notification, Report
from community.domain.exceptions import SelfReportError
from community.domain.value_objects import ReportStatus, UserId
from community.ports.exceptions import UserNotFoundError


@pytest.fixture
def mock_report_service() -> AsyncMock:
    return AsyncMock(spec=ReportService)


@pytest.fixture
def mock_notification_service() -> AsyncMock:
    return AsyncMock(spec=NotificationService)


@pytest.fixture
def test_client(
    mock_report_service: AsyncMock,
    mock_notification_service: AsyncMock,
    alice: CurrentUser,
) -> TestClient:
    """Create TestClient with mocked dependencies."""
    from community.dependencies.authentication import get_current_user
    from community.dependencies.services import (
        get_notification_service,
        get_report_service,
    )
    from community.presentation import router

    app = FastAPI()

    app.dependency_overrides[get_report_service] = lambda: mock_report_service
    app.dependency_overrides[get_notification_service] = (
        lambda: mock_notification_service
    )
    app.dependency_overrides[get_current_user] = lambda: alice

    app.include_router(router)

    return TestClient(app)


class TestFileReport:
    def test_file_report_returns_201(
        self, test_client: TestClient, mock_report_service: AsyncMock, alice
    ) -> None:
        report = Report.file(
            category="spam",
            description="ads",
            author_id=alice.user_id,
            reported_id=UserId.generate(),
        )
        mock_report_service.file_report.return_value = report

        response = test_client.post(
            "/reports",
            json={"category": "spam", "description": "ads", "reported_login": "troll"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["status"] == "pending"
        mock_report_service.file_report.assert_called_once_with(
            category="spam",
            description="ads",
            reported_login="troll",
            author=alice,
        )

    def test_self_report_returns_400(
        self, test_client: TestClient, mock_report_service: AsyncMock
    ) -> None:
        mock_report_service.file_report.side_effect = SelfReportError()

        response = test_client.post(
            "/reports",
            json={"category": "spam", "description": "me", "reported_login": "alice"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "a user cannot report themselves"

    def test_unknown_reported_user_returns_404(
        self, test_client: TestClient, mock_report_service: AsyncMock
    ) -> None:
        mock_report_service.file_report.side_effect = UserNotFoundError("ghost")

        response = test_client.post(
            "/reports",
            json={"category": "spam", "description": "?", "reported_login": "ghost"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestListReports:
    def test_status_filter(
        self, test_client: TestClient, mock_report_service: AsyncMock, alice
    ) -> None:
        mock_report_service.list_reports.return_value = []

        response = test_client.get("/reports", params={"status": "pending"})

        assert response.status_code == status.HTTP_200_OK
        mock_report_service.list_reports.assert_called_once_with(
            alice, status=ReportStatus.PENDING, category=None
        )

    def test_author_filter_takes_precedence(
        self, test_client: TestClient, mock_report_service: AsyncMock, alice
    ) -> None:
        author = UserId.generate()
        mock_report_service.list_by_author.return_value = []

        response = test_client.get(
            "/reports", params={"author_id": author.value, "status": "pending"}
        )

        assert response.status_code == status.HTTP_200_OK
        mock_report_service.list_by_author.assert_called_once_with(author, alice)
        mock_report_service.list_reports.assert_not_called()

    def test_time_window(
        self, test_client: TestClient, mock_report_service: AsyncMock, alice
    ) -> None:
        mock_report_service.list_between.return_value = []

        response = test_client.get(
            "/reports",
            params={
                "start": "2024-01-01T00:00:00+00:00",
                "end": "2024-02-01T00:00:00+00:00",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        mock_report_service.list_between.assert_called_once_with(
            datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 2, 1, tzinfo=UTC), alice
        )

    def test_bad_author_id(
        self, test_client: TestClient, mock_report_service: AsyncMock
    ) -> None:
        response = test_client.get("/reports", params={"author_id": "bad"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Invalid user ID format"


class TestNotifications:
    def test_send_notification(
        self, test_client: TestClient, mock_notification_service: AsyncMock, alice
    ) -> None:
        recipient = UserId.generate()
        mock_notification_service.send.return_value = Notification.send(
            sender_id=alice.user_id, recipient_id=recipient, content="hi"
        )

        response = test_client.post(
            "/notifications",
            json={"recipient_id": recipient.value, "content": "hi"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["read"] is False
        mock_notification_service.send.assert_called_once_with(recipient, "hi", alice)

    def test_unread_count(
        self, test_client: TestClient, mock_notification_service: AsyncMock
    ) -> None:
        mock_notification_service.unread_count.return_value = 2

        response = test_client.get("/notifications/unread-count")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"unread": 2}
