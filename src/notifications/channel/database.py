"""Database channel: stores the notification in the recipient's inbox."""

from protean.utils.globals import current_domain

from notifications.notification.notification import DatabaseNotification


class DatabaseChannel:
    def send(self, notifiable, notification, notification_id: str) -> dict:
        row = DatabaseNotification.create(
            notification_id=notification_id,
            notification_type=type(notification).__name__,
            notifiable_id=notifiable.id,
            data=notification.to_database_payload(),
        )
        current_domain.repository_for(DatabaseNotification).add(row)
        return {"message_id": notification_id, "status": "sent"}
