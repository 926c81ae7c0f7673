"""Job queue registry.

QUEUE_CONNECTION picks the adapter: ``database`` (default) stores jobs as
QueuedJob aggregates, ``memory`` keeps them in this process only.
"""

from notifications.queue.port import JobQueue

_queue: JobQueue | None = None


def get_queue() -> JobQueue:
    """Return the configured job queue (process singleton)."""
    global _queue
    if _queue is None:
        from shared.config import get_app_settings

        connection = get_app_settings().queue_connection
        if connection == "database":
            from notifications.queue.database_queue import DatabaseJobQueue

            _queue = DatabaseJobQueue()
        elif connection == "memory":
            from notifications.queue.fake_queue import InMemoryJobQueue

            _queue = InMemoryJobQueue()
        else:
            raise ValueError(f"Unknown queue connection: {connection}")
    return _queue


def reset_queue():
    """Reset the queue singleton (useful for testing)."""
    global _queue
    _queue = None
