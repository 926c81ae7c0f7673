"""Notification sender: delivers a notification over each of its channels.

Each delivery gets a fresh notification id that every channel shares, so the
stored inbox row and the realtime push can be matched up by the UI.
"""

from uuid import uuid4

import structlog

from notifications.channel import get_channel

logger = structlog.get_logger(__name__)


class NotificationDeliveryError(Exception):
    """A channel adapter reported that it could not deliver a notification."""

    def __init__(self, channel: str, reason: str):
        self.channel = channel
        self.reason = reason
        super().__init__(f"Delivery over {channel} failed: {reason}")


class NotificationSender:
    """Routes notifications to channel adapters from the channel registry."""

    def send(self, notifiable, notification) -> str:
        """Deliver ``notification`` to ``notifiable`` on every channel it uses.

        Returns:
            The notification id.

        Raises:
            NotificationDeliveryError: if a channel adapter reports failure.
                Channels after the failing one are not attempted.
        """
        notification_id = str(uuid4())

        for channel in notification.channels():
            adapter = get_channel(channel)
            result = adapter.send(notifiable, notification, notification_id)

            if result.get("status") != "sent":
                reason = result.get("error", "Unknown dispatch error")
                logger.error(
                    "Notification delivery failed",
                    notification_id=notification_id,
                    notifiable_id=notifiable.id,
                    channel=channel,
                    error=reason,
                )
                raise NotificationDeliveryError(channel, reason)

        logger.info(
            "Notification sent",
            notification_id=notification_id,
            notification_type=type(notification).__name__,
            notifiable_id=notifiable.id,
            channels=notification.channels(),
        )
        return notification_id

    def send_to_all(self, notifiables, notification) -> list[str]:
        return [self.send(notifiable, notification) for notifiable in notifiables]
