"""Notification application service."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.observability import (
    DefaultNotificationServiceProbe,
    NotificationServiceProbe,
)
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Notification
from community.domain.value_objects import NotificationId, UserId
from community.ports.exceptions import NotificationNotFoundError, UserNotFoundError
from community.ports.repositories import INotificationRepository, IUserRepository
from shared_kernel.exceptions import PermissionDeniedError


class NotificationService:
    """Sends notifications between users and tracks their read state."""

    def __init__(
        self,
        session: AsyncSession,
        notification_repository: INotificationRepository,
        user_repository: IUserRepository,
        probe: NotificationServiceProbe | None = None,
    ):
        self._session = session
        self._notification_repository = notification_repository
        self._user_repository = user_repository
        self._probe = probe or DefaultNotificationServiceProbe()

    async def send(
        self, recipient_id: UserId, content: str, sender: CurrentUser
    ) -> Notification:
        """Send an unread notification.

        Raises:
            UserNotFoundError: If the recipient does not exist
            ValidationError: If the content is blank
        """
        notification = Notification.send(
            sender_id=sender.user_id, recipient_id=recipient_id, content=content
        )
        async with self._session.begin():
            if await self._user_repository.get_by_id(recipient_id) is None:
                raise UserNotFoundError(f"User {recipient_id} not found")
            await self._notification_repository.save(notification)

        self._probe.notification_sent(
            notification_id=notification.id.value,
            sender_id=sender.user_id.value,
            recipient_id=recipient_id.value,
        )
        return notification

    async def list_for_user(self, user: CurrentUser) -> list[Notification]:
        """List the user's notifications, newest first."""
        async with self._session.begin():
            return await self._notification_repository.list_for_recipient(user.user_id)

    async def unread_count(self, user: CurrentUser) -> int:
        async with self._session.begin():
            return await self._notification_repository.count_unread(user.user_id)

    async def mark_read(
        self, notification_id: NotificationId, user: CurrentUser
    ) -> Notification:
        """Mark a notification as read. Only its recipient may do so.

        Raises:
            NotificationNotFoundError: If the notification does not exist
            PermissionDeniedError: If the user is not the recipient
        """
        async with self._session.begin():
            notification = await self._notification_repository.get_by_id(
                notification_id
            )
            if notification is None:
                raise NotificationNotFoundError(
                    f"Notification {notification_id} not found"
                )
            if notification.recipient_id != user.user_id:
                raise PermissionDeniedError(
                    "only the recipient can read this notification"
                )
            notification.mark_read()
            await self._notification_repository.save(notification)

        self._probe.notification_read(
            notification_id=notification_id.value, user_id=user.user_id.value
        )
        return notification
