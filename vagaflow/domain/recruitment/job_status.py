"""Job posting statuses."""

from enum import StrEnum


class JobStatus(StrEnum):
    """Whether a job accepts new applications."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
