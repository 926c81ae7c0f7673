"""Pydantic response models for the Notifications API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from notifications.notification.notification import DatabaseNotification


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class SuccessResponse(BaseModel):
    success: bool = True


class NotificationResponse(BaseModel):
    id: str
    type: str
    notifiable_id: int
    data: dict[str, Any]
    read_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_notification(cls, notification: DatabaseNotification) -> "NotificationResponse":
        return cls(
            id=str(notification.id),
            type=notification.notification_type,
            notifiable_id=notification.notifiable_id,
            data=notification.payload(),
            read_at=notification.read_at,
            created_at=notification.created_at,
            updated_at=notification.updated_at,
        )


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
