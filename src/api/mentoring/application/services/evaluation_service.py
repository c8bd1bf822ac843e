"""Evaluation application service."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.value_objects import CurrentUser
from mentoring.application.observability import (
    DefaultEvaluationServiceProbe,
    EvaluationServiceProbe,
)
from mentoring.domain.aggregates import Evaluation
from mentoring.domain.exceptions import (
    MentorshipNotConcludedError,
    NotAParticipantError,
)
from mentoring.domain.value_objects import MentorshipId, MentorshipStatus
from mentoring.ports.exceptions import (
    DuplicateEvaluationError,
    MentorshipNotFoundError,
)
from mentoring.ports.repositories import (
    IEvaluationRepository,
    IMentorshipRepository,
    IParticipantRepository,
)
from shared_kernel.exceptions import DomainError


@dataclass(frozen=True)
class EvaluationSummary:
    """Evaluations of a mentorship with their average score."""

    evaluations: list[Evaluation]

    @property
    def average(self) -> float | None:
        if not self.evaluations:
            return None
        return sum(e.score for e in self.evaluations) / len(self.evaluations)


class EvaluationService:
    """Participants score a mentorship once it has concluded."""

    def __init__(
        self,
        session: AsyncSession,
        mentorship_repository: IMentorshipRepository,
        participant_repository: IParticipantRepository,
        evaluation_repository: IEvaluationRepository,
        probe: EvaluationServiceProbe | None = None,
    ):
        self._session = session
        self._mentorship_repository = mentorship_repository
        self._participant_repository = participant_repository
        self._evaluation_repository = evaluation_repository
        self._probe = probe or DefaultEvaluationServiceProbe()

    async def submit(
        self, mentorship_id: MentorshipId, score: int, evaluator: CurrentUser
    ) -> Evaluation:
        """Record the evaluator's score for a concluded mentorship.

        Raises:
            MentorshipNotFoundError: If the mentorship does not exist
            NotAParticipantError: If the evaluator did not take part in it
            MentorshipNotConcludedError: If it has not concluded yet
            InvalidScoreError: If score is outside 0..5
            DuplicateEvaluationError: If the evaluator already scored it
        """
        try:
            async with self._session.begin():
                mentorship = await self._mentorship_repository.get_by_id(
                    mentorship_id
                )
                if mentorship is None:
                    raise MentorshipNotFoundError(
                        f"Mentorship {mentorship_id} not found"
                    )
                participant = await self._participant_repository.get_for_user(
                    mentorship_id=mentorship_id, user_id=evaluator.user_id
                )
                if participant is None:
                    raise NotAParticipantError()
                if mentorship.status != MentorshipStatus.CONCLUDED:
                    raise MentorshipNotConcludedError()

                evaluation = Evaluation.submit(
                    mentorship_id=mentorship_id,
                    user_id=evaluator.user_id,
                    score=score,
                )
                if (
                    await self._evaluation_repository.get_for_user(
                        mentorship_id=mentorship_id, user_id=evaluator.user_id
                    )
                    is not None
                ):
                    raise DuplicateEvaluationError()
                await self._evaluation_repository.save(evaluation)
        except DomainError as e:
            self._probe.evaluation_rejected(
                mentorship_id=mentorship_id.value,
                user_id=evaluator.user_id.value,
                error=str(e),
            )
            raise

        self._probe.evaluation_submitted(
            mentorship_id=mentorship_id.value,
            user_id=evaluator.user_id.value,
            score=score,
        )
        return evaluation

    async def summarize(self, mentorship_id: MentorshipId) -> EvaluationSummary:
        """List a mentorship's evaluations with their average.

        Raises:
            MentorshipNotFoundError: If the mentorship does not exist
        """
        async with self._session.begin():
            if await self._mentorship_repository.get_by_id(mentorship_id) is None:
                raise MentorshipNotFoundError(f"Mentorship {mentorship_id} not found")
            evaluations = await self._evaluation_repository.list_by_mentorship(
                mentorship_id
            )
        return EvaluationSummary(evaluations=evaluations)
