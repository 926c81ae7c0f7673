"""Broadcast channel: pushes a notification to the recipient's private channel."""

from notifications.channel.broadcast_port import BroadcastPort

BROADCAST_EVENT = "BroadcastNotificationCreated"


def private_channel_for(notifiable_id: int) -> str:
    """Name of the private channel a user's browser listens on."""
    return f"App.Models.User.{notifiable_id}"


class BroadcastChannel:
    def __init__(self, adapter: BroadcastPort):
        self.adapter = adapter

    def send(self, notifiable, notification, notification_id: str) -> dict:
        return self.adapter.publish(
            channel=private_channel_for(notifiable.id),
            event=BROADCAST_EVENT,
            payload=notification.to_broadcast_payload(notification_id),
        )
