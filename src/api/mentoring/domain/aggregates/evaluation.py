"""Evaluation: a participant's score for a concluded mentorship."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from community.domain.value_objects import UserId
from mentoring.domain.exceptions import InvalidScoreError
from mentoring.domain.value_objects import EvaluationId, MentorshipId

MIN_SCORE = 0
MAX_SCORE = 5


@dataclass
class Evaluation:
    """Score from 0 to 5. One per (mentorship, user)."""

    id: EvaluationId
    mentorship_id: MentorshipId
    user_id: UserId
    score: int
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def submit(
        cls, mentorship_id: MentorshipId, user_id: UserId, score: int
    ) -> Evaluation:
        """Factory for a new evaluation.

        Raises:
            InvalidScoreError: If score is outside 0..5
        """
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidScoreError(
                f"score must be between {MIN_SCORE} and {MAX_SCORE}"
            )
        return cls(
            id=EvaluationId.generate(),
            mentorship_id=mentorship_id,
            user_id=user_id,
            score=score,
        )
