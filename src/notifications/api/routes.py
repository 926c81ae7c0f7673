"""FastAPI routes for a user's notification inbox.

Reads go through the inbox queries; changes are processed as commands.
Missing notifications are not an error: the endpoints still report success.
"""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from notifications.api.schemas import (
    NotificationListResponse,
    NotificationResponse,
    SuccessResponse,
)
from notifications.notification import inbox
from notifications.notification.inbox import (
    DeleteAllNotifications,
    DeleteNotification,
    MarkAllNotificationsRead,
    MarkNotificationRead,
)

router = APIRouter(prefix="/users/{user_id}/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(user_id: int) -> NotificationListResponse:
    """The user's 20 most recent notifications, newest first."""
    notifications = inbox.latest_notifications(user_id)
    return NotificationListResponse(
        notifications=[NotificationResponse.from_notification(n) for n in notifications],
    )


@router.post("/mark-all-read", response_model=SuccessResponse)
async def mark_all_read(user_id: int) -> SuccessResponse:
    command = MarkAllNotificationsRead(notifiable_id=user_id)
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


@router.post("/{notification_id}/read", response_model=SuccessResponse)
async def mark_read(user_id: int, notification_id: str) -> SuccessResponse:
    command = MarkNotificationRead(notifiable_id=user_id, notification_id=notification_id)
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


@router.delete("/{notification_id}", response_model=SuccessResponse)
async def delete_notification(user_id: int, notification_id: str) -> SuccessResponse:
    command = DeleteNotification(notifiable_id=user_id, notification_id=notification_id)
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
async def delete_all_notifications(user_id: int) -> SuccessResponse:
    current_domain.process(DeleteAllNotifications(notifiable_id=user_id), asynchronous=False)
    return SuccessResponse()
