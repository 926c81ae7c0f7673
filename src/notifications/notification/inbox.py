"""Notification inbox: what a recipient can do with their stored notifications.

Reads go straight to the repository; changes are commands. Unknown
notification ids are ignored rather than reported: the caller only needs to
know the notification is no longer unread (or no longer there).
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from notifications.notification.notification import DatabaseNotification
from shared.domain import rilltech

logger = structlog.get_logger(__name__)

LATEST_LIMIT = 20


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def notifications_for(notifiable_id: int) -> list[DatabaseNotification]:
    """Every notification stored for ``notifiable_id``, newest first."""
    repo = current_domain.repository_for(DatabaseNotification)
    rows = repo._dao.query.filter(notifiable_id=notifiable_id).all().items
    return sorted(rows, key=lambda row: row.created_at, reverse=True)


def latest_notifications(notifiable_id: int, limit: int = LATEST_LIMIT) -> list[DatabaseNotification]:
    return notifications_for(notifiable_id)[:limit]


def unread_notifications(notifiable_id: int) -> list[DatabaseNotification]:
    return [row for row in notifications_for(notifiable_id) if not row.is_read()]


def _find(notifiable_id: int, notification_id: str) -> DatabaseNotification | None:
    repo = current_domain.repository_for(DatabaseNotification)
    rows = repo._dao.query.filter(id=notification_id, notifiable_id=notifiable_id).all().items
    return rows[0] if rows else None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@rilltech.command(part_of="DatabaseNotification")
class MarkNotificationRead:
    notifiable_id: Integer(required=True)
    notification_id: Identifier(required=True)


@rilltech.command(part_of="DatabaseNotification")
class MarkAllNotificationsRead:
    notifiable_id: Integer(required=True)


@rilltech.command(part_of="DatabaseNotification")
class DeleteNotification:
    notifiable_id: Integer(required=True)
    notification_id: Identifier(required=True)


@rilltech.command(part_of="DatabaseNotification")
class DeleteAllNotifications:
    notifiable_id: Integer(required=True)


@rilltech.command_handler(part_of=DatabaseNotification)
class InboxCommandHandler:
    @handle(MarkNotificationRead)
    def mark_read(self, command) -> bool:
        """Returns False if the notification does not exist."""
        row = _find(command.notifiable_id, command.notification_id)
        if row is None:
            logger.info(
                "Notification not found, nothing to mark read",
                notifiable_id=command.notifiable_id,
                notification_id=command.notification_id,
            )
            return False

        row.mark_as_read()
        current_domain.repository_for(DatabaseNotification).add(row)
        return True

    @handle(MarkAllNotificationsRead)
    def mark_all_read(self, command) -> int:
        """Returns how many notifications changed."""
        repo = current_domain.repository_for(DatabaseNotification)
        unread = unread_notifications(command.notifiable_id)
        for row in unread:
            row.mark_as_read()
            repo.add(row)
        return len(unread)

    @handle(DeleteNotification)
    def delete(self, command) -> bool:
        row = _find(command.notifiable_id, command.notification_id)
        if row is None:
            return False

        current_domain.repository_for(DatabaseNotification)._dao.delete(row)
        return True

    @handle(DeleteAllNotifications)
    def delete_all(self, command) -> int:
        repo = current_domain.repository_for(DatabaseNotification)
        rows = notifications_for(command.notifiable_id)
        for row in rows:
            repo._dao.delete(row)

        logger.info("Notifications deleted", notifiable_id=command.notifiable_id, count=len(rows))
        return len(rows)
