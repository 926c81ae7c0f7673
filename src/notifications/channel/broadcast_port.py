"""Broadcast channel port: abstract interface for realtime push."""

from abc import ABC, abstractmethod


class BroadcastPort(ABC):
    """Abstract interface for realtime broadcast adapters (Pusher, Reverb, ...)."""

    @abstractmethod
    def publish(
        self,
        channel: str,
        event: str,
        payload: dict,
    ) -> dict:
        """Publish ``payload`` as ``event`` on ``channel``.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
