"""Queue worker: pops jobs, rebuilds them and runs their ``handle()``.

A failing job is logged and dropped; the worker moves on to the next one.
"""

import structlog

from notifications.jobs import load_job
from notifications.queue import get_queue
from notifications.queue.port import JobQueue

logger = structlog.get_logger(__name__)


class WorkResult:
    def __init__(self):
        self.processed = 0
        self.failed = 0


def run_next(queue: JobQueue | None = None, queue_name: str = "default", result: WorkResult | None = None) -> bool:
    """Run the oldest job on ``queue_name``. Returns False if the queue was empty."""
    queue = queue or get_queue()
    result = result or WorkResult()

    record = queue.pop(queue_name)
    if record is None:
        return False

    try:
        job = load_job(record["name"], record["payload"])
        job.handle()
    except Exception as exc:
        result.failed += 1
        logger.exception(
            "Job failed",
            job_id=record["job_id"],
            job_name=record["name"],
            error=str(exc),
        )
        return True

    result.processed += 1
    logger.info("Job processed", job_id=record["job_id"], job_name=record["name"])
    return True


def work(queue: JobQueue | None = None, queue_name: str = "default", max_jobs: int | None = None) -> WorkResult:
    """Run jobs until the queue is empty or ``max_jobs`` have been taken."""
    queue = queue or get_queue()
    result = WorkResult()

    taken = 0
    while max_jobs is None or taken < max_jobs:
        if not run_next(queue, queue_name, result):
            break
        taken += 1

    logger.info("Worker stopped", queue=queue_name, processed=result.processed, failed=result.failed)
    return result
