"""Use case for reviewing the applications to a job."""

from vagaflow.application.recruitment.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)
from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.application.recruitment.use_cases.job_access import get_owned_job
from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.entities.application import Application


class ListJobApplicationsUseCase:
    """Use case for listing applications to one of the requesting company's jobs."""

    def __init__(
        self,
        job_repository: JobRepositoryProtocol,
        application_repository: ApplicationRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.job_repository = job_repository
        self.application_repository = application_repository

    def execute(self, job_id: str, company_id: str) -> list[Application]:
        """
        Get every application to a job.

        Raises:
            JobNotFoundError: If the job does not exist
            JobOwnershipError: If the job belongs to another company
        """
        job = get_owned_job(
            self.job_repository,
            JobId.from_string(job_id, "job_id"),
            CompanyId.from_string(company_id, "company_id"),
            "You can only view applications for your own jobs",
        )
        return self.application_repository.find_by_job_id(job.id)
