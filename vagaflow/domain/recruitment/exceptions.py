"""Recruitment domain exceptions."""

from vagaflow.domain.common.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class JobNotFoundError(NotFoundError):
    """Raised when a job cannot be found."""

    def __init__(self, job_id: object = None) -> None:
        super().__init__("Job", job_id)


class ApplicationNotFoundError(NotFoundError):
    """Raised when an application cannot be found."""

    def __init__(self, application_id: object = None) -> None:
        super().__init__("Application", application_id)


class JobClosedError(ValidationError):
    """Raised when applying to a job that no longer accepts applications."""

    def __init__(self) -> None:
        super().__init__("Cannot apply to a closed job", field="job_id")


class ApplicationAlreadyExistsError(ConflictError):
    """Raised when a candidate applies to the same job twice."""

    def __init__(self, candidate_id: object, job_id: object) -> None:
        super().__init__(
            "You have already applied to this job",
            {"candidate_id": str(candidate_id), "job_id": str(job_id)},
        )


class JobOwnershipError(UnauthorizedError):
    """Raised when a company acts on a job posted by another company."""
