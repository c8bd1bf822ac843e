"""HTTP routes for notifications."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from community.application.services import NotificationService
from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from community.dependencies.services import get_notification_service
from community.domain.value_objects import NotificationId, UserId
from community.presentation.notifications.models import (
    NotificationResponse,
    SendNotificationRequest,
    UnreadCountResponse,
)
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import parse_identifier, to_http_exception

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
async def list_notifications(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> list[NotificationResponse]:
    """List the authenticated user's notifications, newest first."""
    try:
        notifications = await service.list_for_user(current_user)
        return [NotificationResponse.from_domain(n) for n in notifications]

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list notifications",
        )


@router.get("/unread-count")
async def unread_count(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> UnreadCountResponse:
    try:
        return UnreadCountResponse(unread=await service.unread_count(current_user))

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to count notifications",
        )


@router.post("", status_code=status.HTTP_201_CREATED)
async def send_notification(
    request: SendNotificationRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationResponse:
    """Send a notification to another user."""
    recipient_id = parse_identifier(UserId, request.recipient_id, "user")

    try:
        notification = await service.send(recipient_id, request.content, current_user)
        return NotificationResponse.from_domain(notification)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send notification",
        )


@router.post("/{notification_id}/read")
async def mark_read(
    notification_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationResponse:
    """Mark a received notification as read."""
    notification_id_obj = parse_identifier(
        NotificationId, notification_id, "notification"
    )

    try:
        notification = await service.mark_read(notification_id_obj, current_user)
        return NotificationResponse.from_domain(notification)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to mark notification as read",
        )
