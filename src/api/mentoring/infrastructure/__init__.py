"""Infrastructure layer for the mentoring bounded context.

SQLAlchemy repository implementations of the mentoring ports.
"""

from mentoring.infrastructure.dialogue_repository import DialogueRepository
from mentoring.infrastructure.evaluation_repository import EvaluationRepository
from mentoring.infrastructure.mentorship_repository import MentorshipRepository
from mentoring.infrastructure.participant_repository import ParticipantRepository

__all__ = [
    "DialogueRepository",
    "EvaluationRepository",
    "MentorshipRepository",
    "ParticipantRepository",
]
