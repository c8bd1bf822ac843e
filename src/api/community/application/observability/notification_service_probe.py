"""Protocol for notification application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class NotificationServiceProbe(Protocol):
    def notification_sent(
        self, notification_id: str, sender_id: str, recipient_id: str
    ) -> None:
        ...

    def notification_read(self, notification_id: str, user_id: str) -> None:
        ...


class DefaultNotificationServiceProbe:
    """Default implementation of NotificationServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def notification_sent(
        self, notification_id: str, sender_id: str, recipient_id: str
    ) -> None:
        self._logger.info(
            "notification_sent",
            notification_id=notification_id,
            sender_id=sender_id,
            recipient_id=recipient_id,
        )

    def notification_read(self, notification_id: str, user_id: str) -> None:
        self._logger.debug(
            "notification_read", notification_id=notification_id, user_id=user_id
        )
