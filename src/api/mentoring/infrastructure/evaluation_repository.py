"""SQLAlchemy implementation of IEvaluationRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.value_objects import UserId
from infrastructure.database import violates_unique_constraint
from mentoring.domain.aggregates import Evaluation
from mentoring.domain.value_objects import EvaluationId, MentorshipId
from mentoring.infrastructure.models import EvaluationModel
from mentoring.ports.exceptions import DuplicateEvaluationError
from mentoring.ports.repositories import IEvaluationRepository


class EvaluationRepository(IEvaluationRepository):
    """Relational repository for evaluations. Evaluations are immutable."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, evaluation: Evaluation) -> None:
        """Insert an evaluation.

        Raises:
            DuplicateEvaluationError: If the (mentorship, user) constraint fires
        """
        self._session.add(
            EvaluationModel(
                id=evaluation.id.value,
                mentorship_id=evaluation.mentorship_id.value,
                user_id=evaluation.user_id.value,
                score=evaluation.score,
                created_at=evaluation.created_at,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as e:
            if violates_unique_constraint(
                e,
                "uq_mentorship_evaluations_user",
                "mentorship_evaluations.mentorship_id",
            ):
                raise DuplicateEvaluationError() from e
            raise

    async def get_for_user(
        self, mentorship_id: MentorshipId, user_id: UserId
    ) -> Evaluation | None:
        stmt = select(EvaluationModel).where(
            EvaluationModel.mentorship_id == mentorship_id.value,
            EvaluationModel.user_id == user_id.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_mentorship(self, mentorship_id: MentorshipId) -> list[Evaluation]:
        stmt = (
            select(EvaluationModel)
            .where(EvaluationModel.mentorship_id == mentorship_id.value)
            .order_by(EvaluationModel.created_at, EvaluationModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: EvaluationModel) -> Evaluation:
        return Evaluation(
            id=EvaluationId(value=model.id),
            mentorship_id=MentorshipId(value=model.mentorship_id),
            user_id=UserId(value=model.user_id),
            score=model.score,
            created_at=model.created_at,
        )
