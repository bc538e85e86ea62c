"""Use case for viewing a single job."""

from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import JobId
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.exceptions import JobNotFoundError


class GetJobByIdUseCase:
    """Use case for viewing a single job."""

    def __init__(self, job_repository: JobRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.job_repository = job_repository

    def execute(self, job_id: str) -> Job:
        """
        Get a job by ID.

        Raises:
            ValidationError: If the ID is malformed
            JobNotFoundError: If the job does not exist
        """
        job = self.job_repository.find_by_id(JobId.from_string(job_id, "job_id"))
        if not job:
            raise JobNotFoundError(job_id)
        return job
