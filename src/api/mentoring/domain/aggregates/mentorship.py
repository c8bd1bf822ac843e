"""Mentorship aggregate and the records that hang off it."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from community.domain.value_objects import UserId
from mentoring.domain.exceptions import (
    InvalidScheduleError,
    MentorshipUnavailableError,
)
from mentoring.domain.value_objects import (
    DialogueId,
    MentorshipId,
    MentorshipStatus,
    ParticipantId,
    ParticipantRole,
)
from shared_kernel.exceptions import ValidationError


def _validated_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("The mentorship name is required")
    if len(cleaned) > 255:
        raise ValidationError("The mentorship name cannot exceed 255 characters")
    return cleaned


def _validated_schedule(start: datetime | None, end: datetime | None) -> None:
    if start is None or end is None:
        raise ValidationError("Start and end are required")
    if (start.utcoffset() is None) != (end.utcoffset() is None):
        raise InvalidScheduleError(
            "start and end must both carry a timezone offset, or neither"
        )
    if start >= end:
        raise InvalidScheduleError()


@dataclass
class Mentorship:
    """A scheduled mentoring session.

    Business rules:
    - Name is required and start is strictly before end
    - New mentorships are SCHEDULED
    - CONCLUDED and CANCELLED are terminal; nothing changes afterwards
    """

    id: MentorshipId
    name: str
    starts_at: datetime
    ends_at: datetime
    status: MentorshipStatus = MentorshipStatus.SCHEDULED

    @classmethod
    def offer(cls, name: str, starts_at: datetime, ends_at: datetime) -> Mentorship:
        """Factory method for a newly offered mentorship.

        Raises:
            ValidationError: If the name is blank
            InvalidScheduleError: If start is not before end
        """
        cleaned = _validated_name(name)
        _validated_schedule(starts_at, ends_at)
        return cls(
            id=MentorshipId.generate(),
            name=cleaned,
            starts_at=starts_at,
            ends_at=ends_at,
        )

    def _ensure_open(self) -> None:
        if self.status.is_terminal:
            raise MentorshipUnavailableError(
                f"mentorship is {self.status.value} and can no longer change"
            )

    def reschedule(
        self,
        name: str | None = None,
        starts_at: datetime | None = None,
        ends_at: datetime | None = None,
    ) -> None:
        """Apply a partial update; the result is re-validated as a whole."""
        self._ensure_open()
        new_name = _validated_name(name) if name is not None else self.name
        new_start = starts_at or self.starts_at
        new_end = ends_at or self.ends_at
        _validated_schedule(new_start, new_end)
        self.name = new_name
        self.starts_at = new_start
        self.ends_at = new_end

    def accept_mentee(self) -> None:
        """Record that a mentee joined. SCHEDULED becomes IN_PROGRESS.

        Raises:
            MentorshipUnavailableError: If the mentorship is terminal
        """
        self._ensure_open()
        if self.status == MentorshipStatus.SCHEDULED:
            self.status = MentorshipStatus.IN_PROGRESS

    def conclude(self) -> None:
        self._ensure_open()
        self.status = MentorshipStatus.CONCLUDED

    def cancel(self) -> None:
        self._ensure_open()
        self.status = MentorshipStatus.CANCELLED


@dataclass
class Participant:
    """A user taking part in one mentorship as MENTOR or MENTEE.

    Unique per (mentorship, user).
    """

    id: ParticipantId
    mentorship_id: MentorshipId
    user_id: UserId
    role: ParticipantRole
    name: str

    @classmethod
    def join(
        cls,
        mentorship_id: MentorshipId,
        user_id: UserId,
        role: ParticipantRole,
        name: str,
    ) -> Participant:
        return cls(
            id=ParticipantId.generate(),
            mentorship_id=mentorship_id,
            user_id=user_id,
            role=role,
            name=name,
        )

    def is_mentor(self) -> bool:
        return self.role == ParticipantRole.MENTOR


@dataclass
class Dialogue:
    """A message sent by a participant during a mentorship."""

    id: DialogueId
    mentorship_id: MentorshipId
    participant_id: ParticipantId
    message: str
    sent_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def send(
        cls, mentorship_id: MentorshipId, participant_id: ParticipantId, message: str
    ) -> Dialogue:
        """Factory for a new message.

        Raises:
            ValidationError: If the message is blank
        """
        cleaned = (message or "").strip()
        if not cleaned:
            raise ValidationError("The message cannot be empty")
        return cls(
            id=DialogueId.generate(),
            mentorship_id=mentorship_id,
            participant_id=participant_id,
            message=cleaned,
        )
