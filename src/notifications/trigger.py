"""Manually deliver NewUserRegistered, for checking notifications end to end."""

import random

import structlog
from protean.exceptions import ObjectNotFoundError

from accounts.user.directory import all_users, get_user, users_with_role
from accounts.user.user import ADMIN_ROLE, SUPER_ADMIN_ROLE
from notifications.notification.new_user_registered import NewUserRegistered
from notifications.notification.sender import NotificationSender

logger = structlog.get_logger(__name__)


def trigger_user_created(
    user_id: int | None = None,
    admin_id: int | None = None,
    sender: NotificationSender | None = None,
    chooser=random.choice,
) -> list[str]:
    """Notify admins that ``user_id`` registered, as if it just had.

    Without ``user_id`` a random user is used. Without ``admin_id`` every
    admin and super-admin is notified.

    Returns:
        The notification ids, one per admin notified.

    Raises:
        ObjectNotFoundError: if the user, the admin, or any admin at all
            cannot be found.
    """
    sender = sender or NotificationSender()

    if user_id is not None:
        user = get_user(user_id)
    else:
        candidates = all_users()
        if not candidates:
            raise ObjectNotFoundError("No users found.")
        user = chooser(candidates)

    if admin_id is not None:
        admins = [get_user(admin_id)]
    else:
        admins = users_with_role(SUPER_ADMIN_ROLE, ADMIN_ROLE)
        if not admins:
            raise ObjectNotFoundError("No admin users found.")

    logger.info("Triggering user created notification", user_id=user.id, admin_count=len(admins))
    return sender.send_to_all(admins, NewUserRegistered(user.to_record()))
