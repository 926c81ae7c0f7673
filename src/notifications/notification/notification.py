"""Notification records: what a delivered notification leaves behind.

A notification is delivered to a notifiable (an admin user) over each of its
channels. The ``database`` channel persists a ``DatabaseNotification`` that
the recipient later lists, marks read or deletes from their inbox. The
``broadcast`` channel leaves nothing behind; it is a realtime push.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, Text

from shared.domain import rilltech


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationChannel(Enum):
    DATABASE = "database"
    BROADCAST = "broadcast"


class NotificationType(Enum):
    USER_REGISTERED = "user_registered"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@rilltech.aggregate
class DatabaseNotification:
    """A notification stored for a single notifiable.

    The id is the one the sender assigned, shared with the broadcast push.
    """

    id: Identifier(identifier=True)
    notification_type: String(required=True, max_length=255)
    notifiable_id: Integer(required=True)
    data: Text(required=True)  # JSON: the database channel payload
    read_at: DateTime()
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, notification_id, notification_type, notifiable_id, data):
        now = datetime.now(UTC)
        return cls(
            id=notification_id,
            notification_type=notification_type,
            notifiable_id=notifiable_id,
            data=json.dumps(data),
            created_at=now,
            updated_at=now,
        )

    def payload(self) -> dict:
        return json.loads(self.data)

    def is_read(self) -> bool:
        return self.read_at is not None

    def mark_as_read(self, read_at=None) -> bool:
        """Stamp the notification read. Returns False if it already was.

        Already-read notifications keep their first timestamp.
        """
        if self.read_at is not None:
            return False
        now = read_at or datetime.now(UTC)
        self.read_at = now
        self.updated_at = now
        return True
