"""Mentoring domain aggregates."""

from mentoring.domain.aggregates.evaluation import Evaluation
from mentoring.domain.aggregates.mentorship import Dialogue, Mentorship, Participant

__all__ = ["Dialogue", "Evaluation", "Mentorship", "Participant"]
