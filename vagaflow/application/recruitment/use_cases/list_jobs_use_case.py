"""Use case for browsing open jobs."""

from vagaflow.application.common.pagination import PaginatedResult, validate_pagination_params
from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.domain.recruitment.entities.job import Job


class ListJobsUseCase:
    """Use case for browsing open jobs, newest first."""

    def __init__(self, job_repository: JobRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.job_repository = job_repository

    def execute(
        self, page: float | None = None, limit: float | None = None
    ) -> PaginatedResult[Job]:
        """
        Get one page of open jobs.

        Out-of-range page and limit values are sanitized, never rejected.

        Args:
            page: Requested page (1-indexed)
            limit: Requested page size

        Returns:
            Paginated open jobs
        """
        pagination = validate_pagination_params(page, limit)
        jobs, total = self.job_repository.find_all_open_paginated(pagination)
        return PaginatedResult(items=jobs, total=total, pagination=pagination)
