"""Integration tests for mentorships and evaluations against a real database."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from mentoring.domain.value_objects import MentorshipStatus, ParticipantRole
from mentoring.ports.exceptions import AlreadyParticipantError, DuplicateEvaluationError

pytestmark = pytest.mark.integration


@pytest.fixture
def schedule():
    starts_at = datetime(2030, 1, 1, 18, 0, tzinfo=timezone.utc)
    return starts_at, starts_at + timedelta(hours=1)


@pytest.fixture
def mentor_and_mentee(register):
    async def _create():
        mentor = replace(await register("grace"), is_mentor=True)
        mentee = await register("ada")
        return mentor, mentee

    return _create


class TestMentorshipLifecycle:
    @pytest.mark.asyncio
    async def test_first_mentee_starts_the_mentorship(
        self, services, mentor_and_mentee, schedule
    ):
        mentor, mentee = await mentor_and_mentee()
        mentorship = await services.mentorships.offer(
            name="Intro to Python",
            starts_at=schedule[0],
            ends_at=schedule[1],
            mentor=mentor,
        )

        joined = await services.mentorships.request(mentorship.id, mentee)

        assert joined.status == MentorshipStatus.IN_PROGRESS
        participants = await services.mentorships.list_participants(mentorship.id)
        roles = {p.user_id: p.role for p in participants}
        assert roles == {
            mentor.user_id: ParticipantRole.MENTOR,
            mentee.user_id: ParticipantRole.MENTEE,
        }
        stored = await services.mentorships.get_mentorship(mentorship.id)
        assert stored.status == MentorshipStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_repeat_request_is_rejected(
        self, services, mentor_and_mentee, schedule
    ):
        mentor, mentee = await mentor_and_mentee()
        mentorship = await services.mentorships.offer(
            name="Intro", starts_at=schedule[0], ends_at=schedule[1], mentor=mentor
        )
        await services.mentorships.request(mentorship.id, mentee)

        with pytest.raises(AlreadyParticipantError):
            await services.mentorships.request(mentorship.id, mentee)

        assert len(await services.mentorships.list_participants(mentorship.id)) == 2

    @pytest.mark.asyncio
    async def test_dialogue_is_shared_by_participants(
        self, services, mentor_and_mentee, schedule
    ):
        mentor, mentee = await mentor_and_mentee()
        mentorship = await services.mentorships.offer(
            name="Intro", starts_at=schedule[0], ends_at=schedule[1], mentor=mentor
        )
        await services.mentorships.request(mentorship.id, mentee)

        await services.mentorships.send_message(mentorship.id, "Welcome!", mentor)
        await services.mentorships.send_message(mentorship.id, "Thanks", mentee)

        messages = await services.mentorships.list_messages(mentorship.id, mentee)
        assert [m.message for m in messages] == ["Welcome!", "Thanks"]


class TestEvaluations:
    @pytest.mark.asyncio
    async def test_second_evaluation_is_rejected(
        self, services, mentor_and_mentee, schedule
    ):
        mentor, mentee = await mentor_and_mentee()
        mentorship = await services.mentorships.offer(
            name="Intro", starts_at=schedule[0], ends_at=schedule[1], mentor=mentor
        )
        await services.mentorships.request(mentorship.id, mentee)
        await services.mentorships.finalize(mentorship.id, mentor)

        await services.evaluations.submit(mentorship.id, 4, mentee)
        with pytest.raises(DuplicateEvaluationError):
            await services.evaluations.submit(mentorship.id, 1, mentee)
        await services.evaluations.submit(mentorship.id, 5, mentor)

        summary = await services.evaluations.summarize(mentorship.id)
        assert sorted(e.score for e in summary.evaluations) == [4, 5]
        assert summary.average == 4.5
