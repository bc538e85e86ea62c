from typing import Protocol

from vagaflow.application.common.pagination import Pagination
from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.job_status import JobStatus


class JobRepositoryProtocol(Protocol):
    def find_by_id(self, job_id: JobId) -> Job | None: ...

    def find_by_company_id(self, company_id: CompanyId) -> list[Job]: ...

    def find_by_status(self, status: JobStatus) -> list[Job]: ...

    def find_all_open(self) -> list[Job]: ...

    def find_all_open_paginated(self, pagination: Pagination) -> tuple[list[Job], int]:
        """Return one page of open jobs, newest first, and the total number of open jobs."""
        ...

    def count_open(self) -> int: ...

    def save(self, job: Job) -> Job: ...

    def update(self, job: Job) -> Job: ...

    def delete(self, job_id: JobId) -> bool: ...
