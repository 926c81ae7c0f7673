"""Database job queue: jobs are QueuedJob rows that workers claim and delete.

Works with any provider; with a SQL DATABASE_URL the web process and the
``manage.py work`` process share the same jobs.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, String, Text
from protean.utils.globals import current_domain
from pydantic import BaseModel

from notifications.queue.port import JobQueue
from shared.domain import rilltech


@rilltech.aggregate
class QueuedJob:
    """A job waiting on a named queue."""

    queue: String(required=True, max_length=100, default="default")
    name: String(required=True, max_length=255)
    payload: Text(required=True)  # JSON: the serialized job
    created_at: DateTime()


class DatabaseJobQueue(JobQueue):
    def push(self, job: BaseModel, queue: str = "default") -> str:
        record = QueuedJob(
            queue=queue,
            name=type(job).__name__,
            payload=job.model_dump_json(),
            created_at=datetime.now(UTC),
        )
        current_domain.repository_for(QueuedJob).add(record)
        return str(record.id)

    def pop(self, queue: str = "default") -> dict | None:
        repo = current_domain.repository_for(QueuedJob)
        waiting = repo._dao.query.filter(queue=queue).all().items
        if not waiting:
            return None

        record = min(waiting, key=lambda job: job.created_at)
        repo._dao.delete(record)
        return {
            "job_id": str(record.id),
            "queue": record.queue,
            "name": record.name,
            "payload": record.payload,
        }

    def size(self, queue: str = "default") -> int:
        repo = current_domain.repository_for(QueuedJob)
        return len(repo._dao.query.filter(queue=queue).all().items)
