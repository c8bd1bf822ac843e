"""Pydantic models for mentorships, their dialogue and evaluations."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from mentoring.application.services import EvaluationSummary
from mentoring.domain.aggregates import Dialogue, Evaluation, Mentorship, Participant
from mentoring.domain.value_objects import MentorshipStatus, ParticipantRole


class OfferMentorshipRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    starts_at: datetime
    ends_at: datetime


class RescheduleMentorshipRequest(BaseModel):
    """Partial update; omitted fields keep their current value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    starts_at: datetime | None = None
    ends_at: datetime | None = None


class MentorshipResponse(BaseModel):
    id: str
    name: str
    starts_at: datetime
    ends_at: datetime
    status: MentorshipStatus

    @classmethod
    def from_domain(cls, mentorship: Mentorship) -> MentorshipResponse:
        return cls(
            id=mentorship.id.value,
            name=mentorship.name,
            starts_at=mentorship.starts_at,
            ends_at=mentorship.ends_at,
            status=mentorship.status,
        )


class ParticipantResponse(BaseModel):
    id: str
    user_id: str
    role: ParticipantRole
    name: str

    @classmethod
    def from_domain(cls, participant: Participant) -> ParticipantResponse:
        return cls(
            id=participant.id.value,
            user_id=participant.user_id.value,
            role=participant.role,
            name=participant.name,
        )


class SendMessageRequest(BaseModel):
    message: str


class MessageResponse(BaseModel):
    id: str
    participant_id: str
    message: str
    sent_at: datetime

    @classmethod
    def from_domain(cls, dialogue: Dialogue) -> MessageResponse:
        return cls(
            id=dialogue.id.value,
            participant_id=dialogue.participant_id.value,
            message=dialogue.message,
            sent_at=dialogue.sent_at,
        )


class SubmitEvaluationRequest(BaseModel):
    score: int = Field(..., description="Score from 0 to 5")


class EvaluationResponse(BaseModel):
    id: str
    user_id: str
    score: int
    created_at: datetime

    @classmethod
    def from_domain(cls, evaluation: Evaluation) -> EvaluationResponse:
        return cls(
            id=evaluation.id.value,
            user_id=evaluation.user_id.value,
            score=evaluation.score,
            created_at=evaluation.created_at,
        )


class EvaluationSummaryResponse(BaseModel):
    average: float | None
    evaluations: list[EvaluationResponse]

    @classmethod
    def from_domain(cls, summary: EvaluationSummary) -> EvaluationSummaryResponse:
        return cls(
            average=summary.average,
            evaluations=[
                EvaluationResponse.from_domain(e) for e in summary.evaluations
            ],
        )
