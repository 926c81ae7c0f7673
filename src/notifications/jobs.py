"""Queued jobs owned by the Notifications context."""

import structlog
from pydantic import BaseModel, ConfigDict

from accounts.user.directory import find_user_by_email, users_with_role
from accounts.user.user import SUPER_ADMIN_ROLE
from notifications.notification.new_user_registered import NewUserRegistered
from notifications.notification.sender import NotificationSender

logger = structlog.get_logger(__name__)


class SendWelcomeEmail(BaseModel):
    """Follow-up work for a newly created user, run by a queue worker.

    Carries only the recipient address and display name; the worker looks
    the user up again when the job runs.
    """

    model_config = ConfigDict(frozen=True)

    recipient_email: str
    recipient_name: str

    def handle(self, sender: NotificationSender | None = None) -> list[str]:
        """Tell every super-admin about the new user.

        Returns:
            Ids of the notifications sent, one per super-admin. Empty if the
            user no longer exists.
        """
        sender = sender or NotificationSender()

        user = find_user_by_email(self.recipient_email)
        if user is None:
            logger.warning(
                "User not found for welcome job, skipping",
                recipient_email=self.recipient_email,
            )
            return []

        admins = users_with_role(SUPER_ADMIN_ROLE)
        notification = NewUserRegistered(user.to_record())
        notification_ids = sender.send_to_all(admins, notification)

        logger.info(
            "Admins notified of new user",
            user_id=user.id,
            admin_count=len(admins),
        )
        return notification_ids


# Job classes a worker can rebuild, by the name the queue stores
JOB_TYPES: dict[str, type[BaseModel]] = {
    SendWelcomeEmail.__name__: SendWelcomeEmail,
}


def load_job(name: str, payload: str) -> BaseModel:
    """Rebuild a queued job from its stored name and JSON payload."""
    try:
        job_cls = JOB_TYPES[name]
    except KeyError:
        raise ValueError(f"Unknown job type: {name}") from None
    return job_cls.model_validate_json(payload)
