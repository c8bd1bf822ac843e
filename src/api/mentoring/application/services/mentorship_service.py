"""Mentorship application service: offering, joining and running mentorships."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.value_objects import CurrentUser
from mentoring.application.observability import (
    DefaultMentorshipServiceProbe,
    MentorshipServiceProbe,
)
from mentoring.domain.aggregates import Dialogue, Mentorship, Participant
from mentoring.domain.exceptions import NotAMentorError, NotAParticipantError
from mentoring.domain.value_objects import (
    MentorshipId,
    MentorshipStatus,
    ParticipantRole,
)
from mentoring.ports.exceptions import AlreadyParticipantError, MentorshipNotFoundError
from mentoring.ports.repositories import (
    IDialogueRepository,
    IMentorshipRepository,
    IParticipantRepository,
)


class MentorshipService:
    """Application service for the mentorship lifecycle and its dialogue.

    Only users flagged as mentors can offer. The offering user becomes the
    MENTOR participant and is the only one who can reschedule, conclude or
    cancel the mentorship.
    """

    def __init__(
        self,
        session: AsyncSession,
        mentorship_repository: IMentorshipRepository,
        participant_repository: IParticipantRepository,
        dialogue_repository: IDialogueRepository,
        probe: MentorshipServiceProbe | None = None,
    ):
        self._session = session
        self._mentorship_repository = mentorship_repository
        self._participant_repository = participant_repository
        self._dialogue_repository = dialogue_repository
        self._probe = probe or DefaultMentorshipServiceProbe()

    async def _get_mentorship(self, mentorship_id: MentorshipId) -> Mentorship:
        mentorship = await self._mentorship_repository.get_by_id(mentorship_id)
        if mentorship is None:
            raise MentorshipNotFoundError(f"Mentorship {mentorship_id} not found")
        return mentorship

    async def _require_participant(
        self, mentorship_id: MentorshipId, actor: CurrentUser, operation: str
    ) -> Participant:
        participant = await self._participant_repository.get_for_user(
            mentorship_id=mentorship_id, user_id=actor.user_id
        )
        if participant is None:
            self._probe.permission_denied(
                mentorship_id=mentorship_id.value,
                user_id=actor.user_id.value,
                operation=operation,
            )
            raise NotAParticipantError()
        return participant

    async def _require_mentor(
        self, mentorship_id: MentorshipId, actor: CurrentUser, operation: str
    ) -> Participant:
        participant = await self._participant_repository.get_for_user(
            mentorship_id=mentorship_id, user_id=actor.user_id
        )
        if participant is None or not participant.is_mentor():
            self._probe.permission_denied(
                mentorship_id=mentorship_id.value,
                user_id=actor.user_id.value,
                operation=operation,
            )
            raise NotAMentorError(f"only the mentor can {operation}")
        return participant

    async def offer(
        self,
        name: str,
        starts_at: datetime,
        ends_at: datetime,
        mentor: CurrentUser,
    ) -> Mentorship:
        """Offer a new mentorship with the actor as its mentor.

        Raises:
            NotAMentorError: If the actor is not eligible to mentor
            ValidationError: If the name is blank
            InvalidScheduleError: If start is not before end
        """
        if not mentor.is_mentor:
            raise NotAMentorError("only mentors can offer mentorships")

        mentorship = Mentorship.offer(name=name, starts_at=starts_at, ends_at=ends_at)
        async with self._session.begin():
            await self._mentorship_repository.save(mentorship)
            await self._participant_repository.save(
                Participant.join(
                    mentorship_id=mentorship.id,
                    user_id=mentor.user_id,
                    role=ParticipantRole.MENTOR,
                    name=mentor.name,
                )
            )

        self._probe.mentorship_offered(
            mentorship_id=mentorship.id.value, mentor_id=mentor.user_id.value
        )
        return mentorship

    async def reschedule(
        self,
        mentorship_id: MentorshipId,
        actor: CurrentUser,
        name: str | None = None,
        starts_at: datetime | None = None,
        ends_at: datetime | None = None,
    ) -> Mentorship:
        """Partially update name and schedule (mentor only).

        Raises:
            MentorshipNotFoundError: If the mentorship does not exist
            NotAMentorError: If the actor is not this mentorship's mentor
            MentorshipUnavailableError: If the mentorship is terminal
            InvalidScheduleError: If the resulting start is not before end
        """
        async with self._session.begin():
            mentorship = await self._get_mentorship(mentorship_id)
            await self._require_mentor(mentorship_id, actor, "reschedule")
            mentorship.reschedule(name=name, starts_at=starts_at, ends_at=ends_at)
            await self._mentorship_repository.save(mentorship)

        self._probe.mentorship_rescheduled(mentorship_id=mentorship_id.value)
        return mentorship

    async def request(
        self, mentorship_id: MentorshipId, mentee: CurrentUser
    ) -> Mentorship:
        """Join a mentorship as a mentee.

        The first mentee moves the mentorship from SCHEDULED to IN_PROGRESS.

        Raises:
            MentorshipNotFoundError: If the mentorship does not exist
            MentorshipUnavailableError: If it is concluded or cancelled
            AlreadyParticipantError: If the user already takes part in it
        """
        async with self._session.begin():
            mentorship = await self._get_mentorship(mentorship_id)
            mentorship.accept_mentee()
            existing = await self._participant_repository.get_for_user(
                mentorship_id=mentorship_id, user_id=mentee.user_id
            )
            if existing is not None:
                raise AlreadyParticipantError()
            await self._participant_repository.save(
                Participant.join(
                    mentorship_id=mentorship_id,
                    user_id=mentee.user_id,
                    role=ParticipantRole.MENTEE,
                    name=mentee.name,
                )
            )
            await self._mentorship_repository.save(mentorship)

        self._probe.mentee_joined(
            mentorship_id=mentorship_id.value, user_id=mentee.user_id.value
        )
        return mentorship

    async def finalize(
        self, mentorship_id: MentorshipId, actor: CurrentUser
    ) -> Mentorship:
        """Mark a mentorship as concluded (mentor only)."""
        async with self._session.begin():
            mentorship = await self._get_mentorship(mentorship_id)
            await self._require_mentor(mentorship_id, actor, "finalize")
            mentorship.conclude()
            await self._mentorship_repository.save(mentorship)

        self._probe.status_changed(
            mentorship_id=mentorship_id.value,
            status=mentorship.status.value,
            actor_id=actor.user_id.value,
        )
        return mentorship

    async def cancel(self, mentorship_id: MentorshipId, actor: CurrentUser) -> Mentorship:
        """Cancel a mentorship (mentor only)."""
        async with self._session.begin():
            mentorship = await self._get_mentorship(mentorship_id)
            await self._require_mentor(mentorship_id, actor, "cancel")
            mentorship.cancel()
            await self._mentorship_repository.save(mentorship)

        self._probe.status_changed(
            mentorship_id=mentorship_id.value,
            status=mentorship.status.value,
            actor_id=actor.user_id.value,
        )
        return mentorship

    async def get_mentorship(self, mentorship_id: MentorshipId) -> Mentorship:
        async with self._session.begin():
            return await self._get_mentorship(mentorship_id)

    async def list_mentorships(
        self,
        status: MentorshipStatus | None = None,
        name: str | None = None,
        starts_after: datetime | None = None,
    ) -> list[Mentorship]:
        """List mentorships by start time, optionally filtered."""
        async with self._session.begin():
            return await self._mentorship_repository.search(
                status=status, name=name, starts_after=starts_after
            )

    async def list_for_user(self, user: CurrentUser) -> list[Mentorship]:
        """List the mentorships the user takes part in, in any role."""
        async with self._session.begin():
            return await self._mentorship_repository.list_for_user(user.user_id)

    async def list_participants(
        self, mentorship_id: MentorshipId
    ) -> list[Participant]:
        async with self._session.begin():
            await self._get_mentorship(mentorship_id)
            return await self._participant_repository.list_by_mentorship(
                mentorship_id
            )

    async def send_message(
        self, mentorship_id: MentorshipId, message: str, sender: CurrentUser
    ) -> Dialogue:
        """Post a message in a mentorship's dialogue (participants only).

        Raises:
            MentorshipNotFoundError: If the mentorship does not exist
            NotAParticipantError: If the sender does not take part in it
            ValidationError: If the message is blank
        """
        async with self._session.begin():
            await self._get_mentorship(mentorship_id)
            participant = await self._require_participant(
                mentorship_id, sender, "send messages"
            )
            dialogue = Dialogue.send(
                mentorship_id=mentorship_id,
                participant_id=participant.id,
                message=message,
            )
            await self._dialogue_repository.save(dialogue)

        self._probe.message_sent(
            mentorship_id=mentorship_id.value, participant_id=participant.id.value
        )
        return dialogue

    async def list_messages(
        self, mentorship_id: MentorshipId, reader: CurrentUser
    ) -> list[Dialogue]:
        """Read a mentorship's dialogue, oldest first (participants only)."""
        async with self._session.begin():
            await self._get_mentorship(mentorship_id)
            await self._require_participant(mentorship_id, reader, "read messages")
            return await self._dialogue_repository.list_by_mentorship(mentorship_id)
