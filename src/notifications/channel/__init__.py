"""Channel adapter registry: one adapter per notification channel.

Uses the DatabaseNotification repository for ``database`` and the fake
broadcaster for ``broadcast`` by default; a real broadcaster (Pusher, Reverb)
plugs in behind BroadcastPort.
"""

from notifications.notification.notification import NotificationChannel

_channel_instances: dict[str, object] = {}


def get_channel(channel_type: str):
    """Return the configured channel adapter (singleton per channel type).

    Args:
        channel_type: One of NotificationChannel enum values ("database", "broadcast")
    """
    if channel_type not in _channel_instances:
        if channel_type == NotificationChannel.DATABASE.value:
            from notifications.channel.database import DatabaseChannel

            _channel_instances[channel_type] = DatabaseChannel()
        elif channel_type == NotificationChannel.BROADCAST.value:
            from notifications.channel.broadcast import BroadcastChannel
            from notifications.channel.fake_broadcast import FakeBroadcastAdapter

            _channel_instances[channel_type] = BroadcastChannel(FakeBroadcastAdapter())
        else:
            raise ValueError(f"Unknown channel type: {channel_type}")

    return _channel_instances[channel_type]


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
