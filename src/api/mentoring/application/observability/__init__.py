"""Domain-Oriented Observability for the mentoring application layer."""

from mentoring.application.observability.evaluation_service_probe import (
    DefaultEvaluationServiceProbe,
    EvaluationServiceProbe,
)
from mentoring.application.observability.mentorship_service_probe import (
    DefaultMentorshipServiceProbe,
    MentorshipServiceProbe,
)

__all__ = [
    "EvaluationServiceProbe",
    "DefaultEvaluationServiceProbe",
    "MentorshipServiceProbe",
    "DefaultMentorshipServiceProbe",
]
