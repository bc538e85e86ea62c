"""Shared lookup for operations a company may only run on its own jobs."""

from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.exceptions import JobNotFoundError, JobOwnershipError


def get_owned_job(
    job_repository: JobRepositoryProtocol, job_id: JobId, company_id: CompanyId, denial: str
) -> Job:
    """
    Load a job and check that the requesting company posted it.

    Raises:
        JobNotFoundError: If the job does not exist
        JobOwnershipError: If the job belongs to another company, with `denial` as message
    """
    job = job_repository.find_by_id(job_id)
    if not job:
        raise JobNotFoundError(job_id)
    if not job.belongs_to_company(company_id):
        raise JobOwnershipError(denial)
    return job
