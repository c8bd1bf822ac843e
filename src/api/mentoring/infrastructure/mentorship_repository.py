"""SQLAlchemy implementation of IMentorshipRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.value_objects import UserId
from mentoring.domain.aggregates import Mentorship
from mentoring.domain.value_objects import MentorshipId, MentorshipStatus
from mentoring.infrastructure.models import MentorshipModel, ParticipantModel
from mentoring.ports.repositories import IMentorshipRepository


class MentorshipRepository(IMentorshipRepository):
    """Relational repository for mentorships."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, mentorship: Mentorship) -> None:
        stmt = select(MentorshipModel).where(MentorshipModel.id == mentorship.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.name = mentorship.name
            model.starts_at = mentorship.starts_at
            model.ends_at = mentorship.ends_at
            model.status = mentorship.status.value
        else:
            self._session.add(
                MentorshipModel(
                    id=mentorship.id.value,
                    name=mentorship.name,
                    starts_at=mentorship.starts_at,
                    ends_at=mentorship.ends_at,
                    status=mentorship.status.value,
                )
            )
        await self._session.flush()

    async def get_by_id(self, mentorship_id: MentorshipId) -> Mentorship | None:
        stmt = select(MentorshipModel).where(MentorshipModel.id == mentorship_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def search(
        self,
        status: MentorshipStatus | None = None,
        name: str | None = None,
        starts_after: datetime | None = None,
    ) -> list[Mentorship]:
        stmt = select(MentorshipModel)
        if status is not None:
            stmt = stmt.where(MentorshipModel.status == status.value)
        if name:
            stmt = stmt.where(
                func.lower(MentorshipModel.name).contains(
                    name.strip().lower(), autoescape=True
                )
            )
        if starts_after is not None:
            stmt = stmt.where(MentorshipModel.starts_at >= starts_after)
        return await self._fetch(stmt)

    async def list_for_user(self, user_id: UserId) -> list[Mentorship]:
        stmt = (
            select(MentorshipModel)
            .join(
                ParticipantModel,
                ParticipantModel.mentorship_id == MentorshipModel.id,
            )
            .where(ParticipantModel.user_id == user_id.value)
        )
        return await self._fetch(stmt)

    async def _fetch(self, stmt) -> list[Mentorship]:
        stmt = stmt.order_by(MentorshipModel.starts_at, MentorshipModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: MentorshipModel) -> Mentorship:
        return Mentorship(
            id=MentorshipId(value=model.id),
            name=model.name,
            starts_at=model.starts_at,
            ends_at=model.ends_at,
            status=MentorshipStatus(model.status),
        )
