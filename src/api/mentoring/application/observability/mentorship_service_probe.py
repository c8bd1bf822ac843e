"""Protocol for mentorship application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class MentorshipServiceProbe(Protocol):
    def mentorship_offered(self, mentorship_id: str, mentor_id: str) -> None:
        ...

    def mentorship_rescheduled(self, mentorship_id: str) -> None:
        ...

    def mentee_joined(self, mentorship_id: str, user_id: str) -> None:
        ...

    def status_changed(self, mentorship_id: str, status: str, actor_id: str) -> None:
        ...

    def message_sent(self, mentorship_id: str, participant_id: str) -> None:
        ...

    def permission_denied(
        self, mentorship_id: str, user_id: str, operation: str
    ) -> None:
        ...


class DefaultMentorshipServiceProbe:
    """Default implementation of MentorshipServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def mentorship_offered(self, mentorship_id: str, mentor_id: str) -> None:
        self._logger.info(
            "mentorship_offered", mentorship_id=mentorship_id, mentor_id=mentor_id
        )

    def mentorship_rescheduled(self, mentorship_id: str) -> None:
        self._logger.info("mentorship_rescheduled", mentorship_id=mentorship_id)

    def mentee_joined(self, mentorship_id: str, user_id: str) -> None:
        self._logger.info(
            "mentee_joined", mentorship_id=mentorship_id, user_id=user_id
        )

    def status_changed(self, mentorship_id: str, status: str, actor_id: str) -> None:
        self._logger.info(
            "mentorship_status_changed",
            mentorship_id=mentorship_id,
            status=status,
            actor_id=actor_id,
        )

    def message_sent(self, mentorship_id: str, participant_id: str) -> None:
        self._logger.debug(
            "mentorship_message_sent",
            mentorship_id=mentorship_id,
            participant_id=participant_id,
        )

    def permission_denied(
        self, mentorship_id: str, user_id: str, operation: str
    ) -> None:
        self._logger.warning(
            "mentorship_permission_denied",
            mentorship_id=mentorship_id,
            user_id=user_id,
            operation=operation,
        )
