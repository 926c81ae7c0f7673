"""NewUserRegistered: tells admins that a user account was just created.

Builds one payload per delivery channel from a ``UserRecord``:

    database:  {id, name, email, created_at, message, type}
    broadcast: {id, user: {id, name, email, created_at}, message, type, created_at}

The broadcast ``id`` is the notification id assigned by the sender, and its
top-level ``created_at`` is when the payload was generated, not when the user
registered (that is ``user.created_at``). Payload building does no I/O.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from protean.exceptions import ValidationError

from accounts.user.user import UserRecord
from notifications.notification.notification import NotificationChannel, NotificationType

MESSAGE_PREFIX = "New user registered: "

_REQUIRED_FIELDS = ("id", "name", "email", "created_at")


def _utc_now() -> datetime:
    return datetime.now(UTC)


class NewUserRegistered:
    """Notification sent to super-admins when a new user registers."""

    notification_type = NotificationType.USER_REGISTERED.value

    def __init__(self, user: UserRecord | None, clock: Callable[[], datetime] | None = None):
        if user is None:
            raise ValidationError({"user": ["is required"]})

        missing = user.missing_fields(*_REQUIRED_FIELDS)
        if missing:
            raise ValidationError({field: ["is required"] for field in missing})

        self.user = user
        self._clock = clock or _utc_now

    @property
    def message(self) -> str:
        return MESSAGE_PREFIX + self.user.name

    def channels(self) -> list[str]:
        return [NotificationChannel.DATABASE.value, NotificationChannel.BROADCAST.value]

    def _user_fields(self) -> dict[str, Any]:
        return {
            "id": self.user.id,
            "name": self.user.name,
            "email": self.user.email,
            "created_at": self.user.created_at,
        }

    def to_database_payload(self) -> dict[str, Any]:
        return {
            **self._user_fields(),
            "message": self.message,
            "type": self.notification_type,
        }

    def to_broadcast_payload(self, notification_id: str) -> dict[str, Any]:
        return {
            "id": notification_id,
            "user": self._user_fields(),
            "message": self.message,
            "type": self.notification_type,
            "created_at": self._clock().isoformat(timespec="seconds"),
        }

    def to_payload(self, channel: str, notification_id: str) -> dict[str, Any]:
        """Build the payload for ``channel``, one of :meth:`channels`."""
        if channel == NotificationChannel.DATABASE.value:
            return self.to_database_payload()
        elif channel == NotificationChannel.BROADCAST.value:
            return self.to_broadcast_payload(notification_id)
        else:
            raise ValueError(f"Unknown channel: {channel}")
