"""Fake job queue: keeps pushed jobs in memory for testing."""

from uuid import uuid4

from pydantic import BaseModel

from notifications.queue.port import JobQueue, QueueUnavailableError


class InMemoryJobQueue(JobQueue):
    """Queue adapter that holds jobs in a list until a worker pops them."""

    def __init__(self):
        self.pushed_jobs: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Queue unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Queue unavailable"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def push(self, job: BaseModel, queue: str = "default") -> str:
        if not self.should_succeed:
            raise QueueUnavailableError(self.failure_reason)

        job_id = f"job-{uuid4().hex[:12]}"
        self.pushed_jobs.append(
            {
                "job_id": job_id,
                "queue": queue,
                "name": type(job).__name__,
                "job": job,
                "payload": job.model_dump_json(),
            }
        )
        return job_id

    def pop(self, queue: str = "default") -> dict | None:
        for index, record in enumerate(self.pushed_jobs):
            if record["queue"] == queue:
                return self.pushed_jobs.pop(index)
        return None

    def size(self, queue: str = "default") -> int:
        return sum(1 for record in self.pushed_jobs if record["queue"] == queue)

    @property
    def jobs(self) -> list[BaseModel]:
        """Jobs still waiting, oldest first."""
        return [record["job"] for record in self.pushed_jobs]

    def reset(self):
        """Clear pushed jobs (useful between tests)."""
        self.pushed_jobs.clear()
        self.should_succeed = True
        self.failure_reason = "Queue unavailable"
