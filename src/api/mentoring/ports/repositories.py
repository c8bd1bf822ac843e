"""Repository protocols (ports) for the mentoring bounded context."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from community.domain.value_objects import UserId
from mentoring.domain.aggregates import Dialogue, Evaluation, Mentorship, Participant
from mentoring.domain.value_objects import MentorshipId, MentorshipStatus


@runtime_checkable
class IMentorshipRepository(Protocol):
    """Repository for Mentorship aggregate persistence."""

    async def save(self, mentorship: Mentorship) -> None:
        """Persist a mentorship (create or update)."""
        ...

    async def get_by_id(self, mentorship_id: MentorshipId) -> Mentorship | None:
        """Retrieve a mentorship by its ID, or None if not found."""
        ...

    async def search(
        self,
        status: MentorshipStatus | None = None,
        name: str | None = None,
        starts_after: datetime | None = None,
    ) -> list[Mentorship]:
        """List mentorships by start time, optionally filtered.

        ``name`` matches case-insensitively anywhere in the mentorship name.
        """
        ...

    async def list_for_user(self, user_id: UserId) -> list[Mentorship]:
        """List the mentorships in which the user is a participant."""
        ...


@runtime_checkable
class IParticipantRepository(Protocol):
    """Repository for mentorship participants."""

    async def save(self, participant: Participant) -> None:
        """Persist a participant.

        Raises:
            AlreadyParticipantError: If the (mentorship, user) pair exists
        """
        ...

    async def get_for_user(
        self, mentorship_id: MentorshipId, user_id: UserId
    ) -> Participant | None:
        """Retrieve a user's participation in a mentorship, if any."""
        ...

    async def list_by_mentorship(self, mentorship_id: MentorshipId) -> list[Participant]:
        """List the participants of a mentorship, mentor first."""
        ...


@runtime_checkable
class IDialogueRepository(Protocol):
    """Repository for mentorship dialogue messages."""

    async def save(self, dialogue: Dialogue) -> None:
        """Persist a message."""
        ...

    async def list_by_mentorship(self, mentorship_id: MentorshipId) -> list[Dialogue]:
        """List the messages of a mentorship, oldest first."""
        ...


@runtime_checkable
class IEvaluationRepository(Protocol):
    """Repository for mentorship evaluations."""

    async def save(self, evaluation: Evaluation) -> None:
        """Persist an evaluation.

        Raises:
            DuplicateEvaluationError: If the user already evaluated the mentorship
        """
        ...

    async def get_for_user(
        self, mentorship_id: MentorshipId, user_id: UserId
    ) -> Evaluation | None:
        """Retrieve the evaluation a user left on a mentorship, if any."""
        ...

    async def list_by_mentorship(self, mentorship_id: MentorshipId) -> list[Evaluation]:
        """List the evaluations of a mentorship, oldest first."""
        ...
