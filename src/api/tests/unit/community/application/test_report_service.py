"""Unit tests for ReportService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import create_autospec

import pytest

from community.application.observability import ReportServiceProbe
from community.application.services import ReportService
from community.domain.aggregates import Report, User
from community.domain.exceptions import ReportAlreadyResolvedError, SelfReportError
from community.domain.value_objects import ReportId, ReportStatus, UserId
from community.ports.exceptions import ReportNotFoundError, UserNotFoundError
from community.ports.repositories import IReportRepository, IUserRepository
from shared_kernel.exceptions import PermissionDeniedError, ValidationError


@pytest.fixture
def report_repo():
    return create_autospec(IReportRepository, instance=True)


@pytest.fixture
def user_repo():
    return create_autospec(IUserRepository, instance=True)


@pytest.fixture
def probe():
    return create_autospec(ReportServiceProbe, instance=True)


@pytest.fixture
def service(mock_session, report_repo, user_repo, probe):
    return ReportService(
        session=mock_session,
        report_repository=report_repo,
        user_repository=user_repo,
        probe=probe,
    )


def _pending_report() -> Report:
    return Report.file(
        category="spam",
        description="links everywhere",
        author_id=UserId.generate(),
        reported_id=UserId.generate(),
    )


class TestFileReport:
    @pytest.mark.asyncio
    async def test_files_pending_report_against_login(
        self, service, user_repo, report_repo, alice
    ):
        troll = User.register(login="troll", password_hash="h", name="Troll")
        user_repo.get_by_login.return_value = troll

        report = await service.file_report("spam", "ads", " Troll ", alice)

        user_repo.get_by_login.assert_awaited_once_with("troll")
        assert report.status == ReportStatus.PENDING
        assert report.author_id == alice.user_id
        assert report.reported_id == troll.id
        report_repo.save.assert_awaited_once_with(report)

    @pytest.mark.asyncio
    async def test_self_report_is_not_persisted(
        self, service, user_repo, report_repo, probe, alice
    ):
        user_repo.get_by_login.return_value = User(
            id=alice.user_id, login=alice.login, password_hash="h", name=alice.name
        )

        with pytest.raises(SelfReportError):
            await service.file_report("spam", "me", alice.login, alice)

        report_repo.save.assert_not_called()
        probe.report_rejected.assert_called_once()

    @pytest.mark.asyncio
    async def test_unknown_reported_login(self, service, user_repo, report_repo, alice):
        user_repo.get_by_login.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.file_report("spam", "who", "ghost", alice)
        report_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_description(self, service, user_repo, report_repo, alice):
        user_repo.get_by_login.return_value = User.register(
            login="troll", password_hash="h", name="Troll"
        )

        with pytest.raises(ValidationError):
            await service.file_report("spam", "  ", "troll", alice)
        report_repo.save.assert_not_called()


class TestAdminOperations:
    @pytest.mark.asyncio
    async def test_listing_requires_admin(self, service, report_repo, alice):
        with pytest.raises(PermissionDeniedError):
            await service.list_reports(alice)
        report_repo.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_admin_lists_with_filters(self, service, report_repo, admin):
        report_repo.search.return_value = []

        await service.list_reports(admin, status=ReportStatus.PENDING, category="spam")

        report_repo.search.assert_awaited_once_with(
            status=ReportStatus.PENDING, category="spam"
        )

    @pytest.mark.asyncio
    async def test_inverted_window_is_rejected(self, service, report_repo, admin):
        now = datetime.now(UTC)
        with pytest.raises(ValidationError):
            await service.list_between(now, now - timedelta(days=1), admin)
        report_repo.list_between.assert_not_called()

    @pytest.mark.asyncio
    async def test_window_mixing_naive_and_aware_bounds_is_rejected(
        self, service, report_repo, admin
    ):
        end = datetime.now(UTC)
        start = (end - timedelta(days=1)).replace(tzinfo=None)

        with pytest.raises(ValidationError):
            await service.list_between(start, end, admin)
        report_repo.list_between.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_pending_report(self, service, report_repo, probe, admin):
        report = _pending_report()
        report_repo.get_by_id.return_value = report

        result = await service.resolve_report(report.id, admin)

        assert result.status == ReportStatus.RESOLVED
        report_repo.save.assert_awaited_once_with(report)
        probe.report_resolved.assert_called_once_with(
            report_id=report.id.value, actor_id=admin.user_id.value
        )

    @pytest.mark.asyncio
    async def test_resolving_twice_fails(self, service, report_repo, admin):
        report = _pending_report()
        report.resolve()
        report_repo.get_by_id.return_value = report

        with pytest.raises(ReportAlreadyResolvedError):
            await service.resolve_report(report.id, admin)
        report_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_unknown_report(self, service, report_repo, admin):
        report_repo.get_by_id.return_value = None
        with pytest.raises(ReportNotFoundError):
            await service.resolve_report(ReportId.generate(), admin)
