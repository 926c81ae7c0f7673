"""Job queue port: abstract interface for handing work to background workers."""

from abc import ABC, abstractmethod

from pydantic import BaseModel


class QueueUnavailableError(Exception):
    """The queue could not accept a job."""


class JobQueue(ABC):
    """Abstract interface for job queue adapters (database, Redis, SQS, ...)."""

    @abstractmethod
    def push(self, job: BaseModel, queue: str = "default") -> str:
        """Enqueue ``job`` and return immediately.

        The job must serialize to JSON; workers rebuild it from that payload.
        Execution, retries and backoff belong to the worker, not the caller.

        Returns:
            The job id assigned by the queue.

        Raises:
            QueueUnavailableError: if the queue cannot accept the job.
        """
        ...

    @abstractmethod
    def pop(self, queue: str = "default") -> dict | None:
        """Remove and return the oldest job on ``queue``, or None if it is empty.

        Returns:
            dict with keys: job_id, queue, name, payload (JSON string)
        """
        ...

    @abstractmethod
    def size(self, queue: str = "default") -> int: ...
