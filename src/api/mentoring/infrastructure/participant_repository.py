"""SQLAlchemy implementation of IParticipantRepository."""

from __future__ import annotations

from sqlalchemy import case, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.value_objects import UserId
from infrastructure.database import violates_unique_constraint
from mentoring.domain.aggregates import Participant
from mentoring.domain.value_objects import MentorshipId, ParticipantId, ParticipantRole
from mentoring.infrastructure.models import ParticipantModel
from mentoring.ports.exceptions import AlreadyParticipantError
from mentoring.ports.repositories import IParticipantRepository


class ParticipantRepository(IParticipantRepository):
    """Relational repository for mentorship participants."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, participant: Participant) -> None:
        """Persist a participant. Participants never change once added.

        Raises:
            AlreadyParticipantError: If the (mentorship, user) constraint fires
        """
        stmt = select(ParticipantModel).where(
            ParticipantModel.id == participant.id.value
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            self._session.add(
                ParticipantModel(
                    id=participant.id.value,
                    mentorship_id=participant.mentorship_id.value,
                    user_id=participant.user_id.value,
                    role=participant.role.value,
                    name=participant.name,
                )
            )

        try:
            await self._session.flush()
        except IntegrityError as e:
            if violates_unique_constraint(
                e,
                "uq_mentorship_participants_user",
                "mentorship_participants.mentorship_id",
            ):
                raise AlreadyParticipantError() from e
            raise

    async def get_for_user(
        self, mentorship_id: MentorshipId, user_id: UserId
    ) -> Participant | None:
        stmt = select(ParticipantModel).where(
            ParticipantModel.mentorship_id == mentorship_id.value,
            ParticipantModel.user_id == user_id.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_mentorship(self, mentorship_id: MentorshipId) -> list[Participant]:
        mentor_first = case(
            (ParticipantModel.role == ParticipantRole.MENTOR.value, 0), else_=1
        )
        stmt = (
            select(ParticipantModel)
            .where(ParticipantModel.mentorship_id == mentorship_id.value)
            .order_by(mentor_first, ParticipantModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: ParticipantModel) -> Participant:
        return Participant(
            id=ParticipantId(value=model.id),
            mentorship_id=MentorshipId(value=model.mentorship_id),
            user_id=UserId(value=model.user_id),
            role=ParticipantRole(model.role),
            name=model.name,
        )
