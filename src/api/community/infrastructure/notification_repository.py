"""SQLAlchemy implementation of INotificationRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Notification
from community.domain.value_objects import NotificationId, UserId
from community.infrastructure.models import NotificationModel
from community.ports.repositories import INotificationRepository


class NotificationRepository(INotificationRepository):
    """Relational repository for notifications."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, notification: Notification) -> None:
        stmt = select(NotificationModel).where(
            NotificationModel.id == notification.id.value
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.read = notification.read
        else:
            self._session.add(
                NotificationModel(
                    id=notification.id.value,
                    sender_id=notification.sender_id.value,
                    recipient_id=notification.recipient_id.value,
                    content=notification.content,
                    sent_at=notification.sent_at,
                    read=notification.read,
                )
            )
        await self._session.flush()

    async def get_by_id(self, notification_id: NotificationId) -> Notification | None:
        stmt = select(NotificationModel).where(
            NotificationModel.id == notification_id.value
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_for_recipient(self, recipient_id: UserId) -> list[Notification]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.recipient_id == recipient_id.value)
            .order_by(NotificationModel.sent_at.desc(), NotificationModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count_unread(self, recipient_id: UserId) -> int:
        stmt = select(func.count(NotificationModel.id)).where(
            NotificationModel.recipient_id == recipient_id.value,
            NotificationModel.read.is_(False),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _to_domain(model: NotificationModel) -> Notification:
        return Notification(
            id=NotificationId(value=model.id),
            sender_id=UserId(value=model.sender_id),
            recipient_id=UserId(value=model.recipient_id),
            content=model.content,
            sent_at=model.sent_at,
            read=model.read,
        )
