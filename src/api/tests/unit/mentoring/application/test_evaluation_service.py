"""Unit tests for EvaluationService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import create_autospec

import pytest

from mentoring.application.observability import EvaluationServiceProbe
from mentoring.application.services import EvaluationService, EvaluationSummary
from mentoring.domain.aggregates import Evaluation, Mentorship, Participant
from mentoring.domain.exceptions import (
    InvalidScoreError,
    MentorshipNotConcludedError,
    NotAParticipantError,
)
from mentoring.domain.value_objects import MentorshipId, ParticipantRole
from mentoring.ports.exceptions import DuplicateEvaluationError, MentorshipNotFoundError
from mentoring.ports.repositories import (
    IEvaluationRepository,
    IMentorshipRepository,
    IParticipantRepository,
)

START = datetime(2030, 5, 1, 18, 0, tzinfo=UTC)


@pytest.fixture
def mentorship_repo():
    return create_autospec(IMentorshipRepository, instance=True)


@pytest.fixture
def participant_repo():
    return create_autospec(IParticipantRepository, instance=True)


@pytest.fixture
def evaluation_repo():
    repo = create_autospec(IEvaluationRepository, instance=True)
    repo.get_for_user.return_value = None
    return repo


@pytest.fixture
def probe():
    return create_autospec(EvaluationServiceProbe, instance=True)


@pytest.fixture
def service(mock_session, mentorship_repo, participant_repo, evaluation_repo, probe):
    return EvaluationService(
        session=mock_session,
        mentorship_repository=mentorship_repo,
        participant_repository=participant_repo,
        evaluation_repository=evaluation_repo,
        probe=probe,
    )


@pytest.fixture
def concluded(mentorship_repo, participant_repo, alice):
    mentorship = Mentorship.offer(
        name="Pairing", starts_at=START, ends_at=START + timedelta(hours=1)
    )
    mentorship.conclude()
    mentorship_repo.get_by_id.return_value = mentorship
    participant_repo.get_for_user.return_value = Participant.join(
        mentorship_id=mentorship.id,
        user_id=alice.user_id,
        role=ParticipantRole.MENTEE,
        name=alice.name,
    )
    return mentorship


class TestSubmit:
    @pytest.mark.asyncio
    async def test_participant_scores_concluded_mentorship(
        self, service, concluded, evaluation_repo, probe, alice
    ):
        evaluation = await service.submit(concluded.id, 4, alice)

        assert evaluation.score == 4
        assert evaluation.user_id == alice.user_id
        evaluation_repo.save.assert_awaited_once_with(evaluation)
        probe.evaluation_submitted.assert_called_once_with(
            mentorship_id=concluded.id.value, user_id=alice.user_id.value, score=4
        )

    @pytest.mark.asyncio
    async def test_second_evaluation_is_rejected(
        self, service, concluded, evaluation_repo, probe, alice
    ):
        evaluation_repo.get_for_user.return_value = Evaluation.submit(
            mentorship_id=concluded.id, user_id=alice.user_id, score=5
        )

        with pytest.raises(DuplicateEvaluationError):
            await service.submit(concluded.id, 3, alice)

        evaluation_repo.save.assert_not_called()
        probe.evaluation_rejected.assert_called_once()

    @pytest.mark.asyncio
    async def test_open_mentorship_cannot_be_evaluated(
        self, service, mentorship_repo, participant_repo, evaluation_repo, alice
    ):
        mentorship = Mentorship.offer(
            name="Pairing", starts_at=START, ends_at=START + timedelta(hours=1)
        )
        mentorship_repo.get_by_id.return_value = mentorship
        participant_repo.get_for_user.return_value = Participant.join(
            mentorship_id=mentorship.id,
            user_id=alice.user_id,
            role=ParticipantRole.MENTEE,
            name=alice.name,
        )

        with pytest.raises(MentorshipNotConcludedError):
            await service.submit(mentorship.id, 4, alice)
        evaluation_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_outsider_cannot_evaluate(
        self, service, concluded, participant_repo, evaluation_repo, bob
    ):
        participant_repo.get_for_user.return_value = None

        with pytest.raises(NotAParticipantError):
            await service.submit(concluded.id, 4, bob)
        evaluation_repo.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("score", [-1, 6])
    async def test_score_out_of_range(
        self, service, concluded, evaluation_repo, alice, score
    ):
        with pytest.raises(InvalidScoreError):
            await service.submit(concluded.id, score, alice)
        evaluation_repo.get_for_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_mentorship(self, service, mentorship_repo, probe, alice):
        mentorship_repo.get_by_id.return_value = None

        with pytest.raises(MentorshipNotFoundError):
            await service.submit(MentorshipId.generate(), 4, alice)
        probe.evaluation_rejected.assert_called_once()


class TestSummary:
    def test_average_of_no_evaluations_is_none(self):
        assert EvaluationSummary(evaluations=[]).average is None

    @pytest.mark.asyncio
    async def test_summarize_averages_scores(
        self, service, concluded, evaluation_repo, alice, bob
    ):
        evaluation_repo.list_by_mentorship.return_value = [
            Evaluation.submit(mentorship_id=concluded.id, user_id=alice.user_id, score=5),
            Evaluation.submit(mentorship_id=concluded.id, user_id=bob.user_id, score=2),
        ]

        summary = await service.summarize(concluded.id)

        assert summary.average == 3.5
        assert len(summary.evaluations) == 2
