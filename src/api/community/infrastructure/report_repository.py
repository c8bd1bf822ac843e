"""SQLAlchemy implementation of IReportRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Report
from community.domain.value_objects import ReportId, ReportStatus, UserId
from community.infrastructure.models import ReportModel
from community.ports.repositories import IReportRepository


class ReportRepository(IReportRepository):
    """Relational repository for reports."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, report: Report) -> None:
        stmt = select(ReportModel).where(ReportModel.id == report.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.status = report.status.value
        else:
            self._session.add(
                ReportModel(
                    id=report.id.value,
                    category=report.category,
                    description=report.description,
                    status=report.status.value,
                    author_id=report.author_id.value,
                    reported_id=report.reported_id.value,
                    created_at=report.created_at,
                )
            )
        await self._session.flush()

    async def get_by_id(self, report_id: ReportId) -> Report | None:
        stmt = select(ReportModel).where(ReportModel.id == report_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def search(
        self,
        status: ReportStatus | None = None,
        category: str | None = None,
    ) -> list[Report]:
        stmt = select(ReportModel)
        if status is not None:
            stmt = stmt.where(ReportModel.status == status.value)
        if category:
            stmt = stmt.where(ReportModel.category == category)
        return await self._fetch(stmt)

    async def list_by_author(self, author_id: UserId) -> list[Report]:
        return await self._fetch(
            select(ReportModel).where(ReportModel.author_id == author_id.value)
        )

    async def list_by_reported(self, reported_id: UserId) -> list[Report]:
        return await self._fetch(
            select(ReportModel).where(ReportModel.reported_id == reported_id.value)
        )

    async def list_between(self, start: datetime, end: datetime) -> list[Report]:
        return await self._fetch(
            select(ReportModel).where(ReportModel.created_at.between(start, end))
        )

    async def _fetch(self, stmt) -> list[Report]:
        stmt = stmt.order_by(ReportModel.created_at.desc(), ReportModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: ReportModel) -> Report:
        return Report(
            id=ReportId(value=model.id),
            category=model.category,
            description=model.description,
            author_id=UserId(value=model.author_id),
            reported_id=UserId(value=model.reported_id),
            status=ReportStatus(model.status),
            created_at=model.created_at,
        )
