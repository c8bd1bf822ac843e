"""Report application service: filing and reviewing user reports."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.authorization import require_admin
from community.application.observability import (
    DefaultReportServiceProbe,
    ReportServiceProbe,
)
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Report, User
from community.domain.value_objects import ReportId, ReportStatus, UserId
from community.ports.exceptions import ReportNotFoundError, UserNotFoundError
from community.ports.repositories import IReportRepository, IUserRepository
from shared_kernel.exceptions import ValidationError


class ReportService:
    """Application service for reports.

    Any user may file a report; only admins may list or resolve them.
    """

    def __init__(
        self,
        session: AsyncSession,
        report_repository: IReportRepository,
        user_repository: IUserRepository,
        category_max_length: int = 100,
        description_max_length: int = 500,
        probe: ReportServiceProbe | None = None,
    ):
        self._session = session
        self._report_repository = report_repository
        self._user_repository = user_repository
        self._category_max_length = category_max_length
        self._description_max_length = description_max_length
        self._probe = probe or DefaultReportServiceProbe()

    async def file_report(
        self,
        category: str,
        description: str,
        reported_login: str,
        author: CurrentUser,
    ) -> Report:
        """File a PENDING report against another user.

        Nothing is persisted when validation fails.

        Raises:
            ValidationError: If category or description is blank or too long
            UserNotFoundError: If no user has ``reported_login``
            SelfReportError: If the author reports themselves
        """
        try:
            async with self._session.begin():
                reported = await self._user_repository.get_by_login(
                    User.normalize_login(reported_login or "")
                )
                if reported is None:
                    raise UserNotFoundError(f"User '{reported_login}' not found")

                report = Report.file(
                    category=category,
                    description=description,
                    author_id=author.user_id,
                    reported_id=reported.id,
                    max_category_length=self._category_max_length,
                    max_description_length=self._description_max_length,
                )
                await self._report_repository.save(report)
        except (ValidationError, UserNotFoundError) as e:
            self._probe.report_rejected(author_id=author.user_id.value, error=str(e))
            raise

        self._probe.report_filed(
            report_id=report.id.value,
            author_id=author.user_id.value,
            reported_id=reported.id.value,
            category=report.category,
        )
        return report

    async def list_reports(
        self,
        actor: CurrentUser,
        status: ReportStatus | None = None,
        category: str | None = None,
    ) -> list[Report]:
        """List reports, newest first, optionally filtered (admin only)."""
        require_admin(actor)
        async with self._session.begin():
            return await self._report_repository.search(
                status=status, category=category
            )

    async def list_by_author(
        self, author_id: UserId, actor: CurrentUser
    ) -> list[Report]:
        """List the reports filed by a user (admin only)."""
        require_admin(actor)
        async with self._session.begin():
            return await self._report_repository.list_by_author(author_id)

    async def list_by_reported(
        self, reported_id: UserId, actor: CurrentUser
    ) -> list[Report]:
        """List the reports filed against a user (admin only)."""
        require_admin(actor)
        async with self._session.begin():
            return await self._report_repository.list_by_reported(reported_id)

    async def list_between(
        self, start: datetime, end: datetime, actor: CurrentUser
    ) -> list[Report]:
        """List the reports filed within a time window (admin only).

        Raises:
            ValidationError: If ``start`` is after ``end`` or only one of them
                carries a timezone offset
        """
        require_admin(actor)
        if (start.utcoffset() is None) != (end.utcoffset() is None):
            raise ValidationError(
                "start and end must both carry a timezone offset, or neither"
            )
        if start > end:
            raise ValidationError("start must not be after end")
        async with self._session.begin():
            return await self._report_repository.list_between(start, end)

    async def resolve_report(self, report_id: ReportId, actor: CurrentUser) -> Report:
        """Mark a PENDING report as RESOLVED (admin only).

        Raises:
            ReportNotFoundError: If the report does not exist
            ReportAlreadyResolvedError: If the report is already resolved
        """
        require_admin(actor)
        async with self._session.begin():
            report = await self._report_repository.get_by_id(report_id)
            if report is None:
                raise ReportNotFoundError(f"Report {report_id} not found")
            report.resolve()
            await self._report_repository.save(report)

        self._probe.report_resolved(
            report_id=report_id.value, actor_id=actor.user_id.value
        )
        return report
