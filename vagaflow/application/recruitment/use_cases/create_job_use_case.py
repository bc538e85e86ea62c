"""Use case for posting a job."""

import structlog

from vagaflow.application.profiles.protocols.company_repository import CompanyRepositoryProtocol
from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import CompanyId
from vagaflow.domain.profiles.exceptions import CompanyNotFoundError
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.value_objects.job_title import JobTitle

logger = structlog.get_logger(__name__)


class CreateJobUseCase:
    """Use case for posting a job."""

    def __init__(
        self,
        company_repository: CompanyRepositoryProtocol,
        job_repository: JobRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.company_repository = company_repository
        self.job_repository = job_repository

    def execute(self, company_id: str, title: str | None, description: str | None) -> Job:
        """
        Post a new OPEN job for a company.

        Args:
            company_id: Company posting the job
            title: Job title
            description: Job description

        Returns:
            Created job

        Raises:
            ValidationError: If title or description is invalid
            CompanyNotFoundError: If the company does not exist
        """
        job_title = JobTitle(title or "")
        owner_id = CompanyId.from_string(company_id, "company_id")

        if not self.company_repository.find_by_id(owner_id):
            raise CompanyNotFoundError(company_id)

        job = Job.create(company_id=owner_id, title=job_title, description=description or "")
        job = self.job_repository.save(job)

        logger.info("job_created", job_id=str(job.id), company_id=company_id)

        return job
