"""Fake broadcast adapter: records published events for testing."""

from uuid import uuid4

from notifications.channel.broadcast_port import BroadcastPort


class FakeBroadcastAdapter(BroadcastPort):
    """Broadcast adapter that records events in memory for test assertions."""

    def __init__(self):
        self.published: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Broadcast failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Broadcast failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish(
        self,
        channel: str,
        event: str,
        payload: dict,
    ) -> dict:
        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"broadcast-{uuid4().hex[:12]}"
        record = {
            "message_id": message_id,
            "channel": channel,
            "event": event,
            "payload": payload,
        }
        self.published.append(record)

        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear published events (useful between tests)."""
        self.published.clear()
        self.should_succeed = True
        self.failure_reason = "Broadcast failed"
