from typing import Protocol

from vagaflow.domain.common.value_objects.ids import ApplicationId, CandidateId, CompanyId, JobId
from vagaflow.domain.recruitment.application_status import ApplicationStatus
from vagaflow.domain.recruitment.entities.application import Application


class ApplicationRepositoryProtocol(Protocol):
    def find_by_id(self, application_id: ApplicationId) -> Application | None: ...

    def find_by_candidate_id(self, candidate_id: CandidateId) -> list[Application]: ...

    def find_by_job_id(self, job_id: JobId) -> list[Application]: ...

    def find_by_company_id(self, company_id: CompanyId) -> list[Application]:
        """Applications to any job posted by the company."""
        ...

    def find_by_status(self, status: ApplicationStatus) -> list[Application]: ...

    def exists_by_candidate_and_job(self, candidate_id: CandidateId, job_id: JobId) -> bool: ...

    def save(self, application: Application) -> Application:
        """Insert a new application. Raises ApplicationAlreadyExistsError on a duplicate pair."""
        ...

    def update(self, application: Application) -> Application: ...

    def delete(self, application_id: ApplicationId) -> bool: ...
