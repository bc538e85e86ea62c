"""Use case for listing every job a company posted."""

from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import CompanyId
from vagaflow.domain.recruitment.entities.job import Job


class ListCompanyJobsUseCase:
    """Use case for listing a company's jobs, open and closed."""

    def __init__(self, job_repository: JobRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.job_repository = job_repository

    def execute(self, company_id: str) -> list[Job]:
        return self.job_repository.find_by_company_id(
            CompanyId.from_string(company_id, "company_id")
        )
