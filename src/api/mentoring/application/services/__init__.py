"""Application services for the mentoring context."""

from mentoring.application.services.evaluation_service import (
    EvaluationService,
    EvaluationSummary,
)
from mentoring.application.services.mentorship_service import MentorshipService

__all__ = ["EvaluationService", "EvaluationSummary", "MentorshipService"]
