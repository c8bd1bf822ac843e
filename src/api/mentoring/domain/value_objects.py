"""Value objects for the mentoring domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.identifiers import EntityId


@dataclass(frozen=True)
class MentorshipId(EntityId):
    """Identifier for a Mentorship aggregate."""


@dataclass(frozen=True)
class ParticipantId(EntityId):
    """Identifier for a Participant."""


@dataclass(frozen=True)
class DialogueId(EntityId):
    """Identifier for a Dialogue message."""


@dataclass(frozen=True)
class EvaluationId(EntityId):
    """Identifier for an Evaluation."""


class MentorshipStatus(StrEnum):
    """Lifecycle of a mentorship.

    SCHEDULED -> IN_PROGRESS when a mentee joins; either of those may move to
    CONCLUDED or CANCELLED, which are terminal.
    """

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    CONCLUDED = "concluded"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (MentorshipStatus.CONCLUDED, MentorshipStatus.CANCELLED)


class ParticipantRole(StrEnum):
    """Role of a participant within one mentorship."""

    MENTOR = "mentor"
    MENTEE = "mentee"
