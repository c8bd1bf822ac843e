"""Protocol for evaluation application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class EvaluationServiceProbe(Protocol):
    def evaluation_submitted(
        self, mentorship_id: str, user_id: str, score: int
    ) -> None:
        ...

    def evaluation_rejected(self, mentorship_id: str, user_id: str, error: str) -> None:
        ...


class DefaultEvaluationServiceProbe:
    """Default implementation of EvaluationServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def evaluation_submitted(
        self, mentorship_id: str, user_id: str, score: int
    ) -> None:
        self._logger.info(
            "evaluation_submitted",
            mentorship_id=mentorship_id,
            user_id=user_id,
            score=score,
        )

    def evaluation_rejected(self, mentorship_id: str, user_id: str, error: str) -> None:
        self._logger.warning(
            "evaluation_rejected",
            mentorship_id=mentorship_id,
            user_id=user_id,
            error=error,
        )
