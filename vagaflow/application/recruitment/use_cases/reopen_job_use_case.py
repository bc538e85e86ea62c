"""Use case for reopening a closed job."""

import structlog

from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.application.recruitment.use_cases.job_access import get_owned_job
from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.entities.job import Job

logger = structlog.get_logger(__name__)


class ReopenJobUseCase:
    """Use case for reopening a job."""

    def __init__(self, job_repository: JobRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.job_repository = job_repository

    def execute(self, job_id: str, company_id: str) -> Job:
        """
        Reopen a closed job posted by the requesting company.

        Raises:
            JobNotFoundError: If the job does not exist
            JobOwnershipError: If the job belongs to another company
            ValidationError: If the job is already open
        """
        job = get_owned_job(
            self.job_repository,
            JobId.from_string(job_id, "job_id"),
            CompanyId.from_string(company_id, "company_id"),
            "You can only reopen your own jobs",
        )
        job = self.job_repository.update(job.reopen())

        logger.info("job_reopened", job_id=job_id, company_id=company_id)

        return job
