"""Pydantic models for notifications."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from community.domain.aggregates import Notification


class SendNotificationRequest(BaseModel):
    recipient_id: str = Field(..., description="User ID of the recipient")
    content: str = Field(..., description="Message text")


class NotificationResponse(BaseModel):
    id: str
    sender_id: str
    recipient_id: str
    content: str
    sent_at: datetime
    read: bool

    @classmethod
    def from_domain(cls, notification: Notification) -> NotificationResponse:
        return cls(
            id=notification.id.value,
            sender_id=notification.sender_id.value,
            recipient_id=notification.recipient_id.value,
            content=notification.content,
            sent_at=notification.sent_at,
            read=notification.read,
        )


class UnreadCountResponse(BaseModel):
    unread: int
