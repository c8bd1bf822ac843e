"""SQLAlchemy ORM models for the mentoring bounded context."""

from mentoring.infrastructure.models.mentorship import (
    DialogueModel,
    EvaluationModel,
    MentorshipModel,
    ParticipantModel,
)

__all__ = ["DialogueModel", "EvaluationModel", "MentorshipModel", "ParticipantModel"]
