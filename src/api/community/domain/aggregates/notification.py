"""Notification: a message from one user to another with a read flag."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from community.domain.value_objects import NotificationId, UserId
from shared_kernel.exceptions import ValidationError


@dataclass
class Notification:
    id: NotificationId
    sender_id: UserId
    recipient_id: UserId
    content: str
    sent_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    read: bool = False

    @classmethod
    def send(cls, sender_id: UserId, recipient_id: UserId, content: str) -> Notification:
        """Factory for a new unread notification.

        Raises:
            ValidationError: If content is blank
        """
        cleaned = (content or "").strip()
        if not cleaned:
            raise ValidationError("Notification content cannot be empty")
        return cls(
            id=NotificationId.generate(),
            sender_id=sender_id,
            recipient_id=recipient_id,
            content=cleaned,
        )

    def mark_read(self) -> None:
        self.read = True
