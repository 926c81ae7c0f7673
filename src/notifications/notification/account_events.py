"""Inbound event handler: Notifications reacts to Accounts events.

Listens for UserCreated to queue the welcome job.
"""

import structlog
from protean.exceptions import ValidationError
from protean.utils.mixins import handle

from accounts.user.events import UserCreated
from accounts.user.user import User
from notifications.jobs import SendWelcomeEmail
from notifications.queue import get_queue
from shared.domain import rilltech

logger = structlog.get_logger(__name__)


@rilltech.event_handler(part_of=User)
class AccountEventsHandler:
    """Reacts to Accounts events with follow-up work for new users."""

    @handle(UserCreated)
    def send_welcome_email(self, event: UserCreated) -> None:
        """Queue a welcome job for the newly created user.

        Raises:
            ValidationError: if the event has no user, or the user has no
                email or name. Nothing is queued in that case.
            QueueUnavailableError: if the queue rejects the job.
        """
        if event.user is None:
            raise ValidationError({"user": ["is required"]})

        missing = event.user.missing_fields("email", "name")
        if missing:
            raise ValidationError({field: ["is required"] for field in missing})

        job = SendWelcomeEmail(recipient_email=event.user.email, recipient_name=event.user.name)
        job_id = get_queue().push(job)

        logger.info(
            "Welcome job queued",
            job_id=job_id,
            user_id=event.user.id,
            recipient_email=event.user.email,
        )
