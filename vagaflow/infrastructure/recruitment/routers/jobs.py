"""API routes for job postings."""

from fastapi import APIRouter, Depends, status

from vagaflow.application.recruitment.use_cases.close_job_use_case import CloseJobUseCase
from vagaflow.application.recruitment.use_cases.create_job_use_case import CreateJobUseCase
from vagaflow.application.recruitment.use_cases.get_job_by_id_use_case import GetJobByIdUseCase
from vagaflow.application.recruitment.use_cases.list_job_applications_use_case import (
    ListJobApplicationsUseCase,
)
from vagaflow.application.recruitment.use_cases.list_jobs_use_case import ListJobsUseCase
from vagaflow.application.recruitment.use_cases.reopen_job_use_case import ReopenJobUseCase
from vagaflow.core import container
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.profiles.dependencies import CurrentCompany
from vagaflow.infrastructure.recruitment.schemas import (
    ApplicationResponse,
    JobCreateRequest,
    JobListResponse,
    JobResponse,
)


router = APIRouter(prefix="/jobs", tags=["jobs"])


def _as_number(raw: str | None) -> float | None:
    """Loose query parsing: anything unparsable counts as missing."""
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    request: JobCreateRequest,
    company: CurrentCompany,
    use_case: CreateJobUseCase = Depends(inject_use_case(container.create_job_use_case)),
) -> JobResponse:
    """
    Post a job for the authenticated company.

    Args:
        request: Title and description
        company: Company profile of the authenticated user
        use_case: CreateJobUseCase injected via dependency container

    Returns:
        The created, OPEN job
    """
    job = use_case.execute(
        company_id=str(company.id), title=request.title, description=request.description
    )
    return JobResponse.from_entity(job)


@router.get("")
def list_jobs(
    page: str | None = None,
    limit: str | None = None,
    use_case: ListJobsUseCase = Depends(inject_use_case(container.list_jobs_use_case)),
) -> JobListResponse:
    """
    List open jobs, newest first.

    Invalid page or limit values fall back to defaults; limit is capped at 100.
    """
    result = use_case.execute(page=_as_number(page), limit=_as_number(limit))
    return JobListResponse.from_result(result)


@router.get("/{job_id}")
def get_job(
    job_id: str,
    use_case: GetJobByIdUseCase = Depends(inject_use_case(container.get_job_by_id_use_case)),
) -> JobResponse:
    """Get a job by ID."""
    return JobResponse.from_entity(use_case.execute(job_id))


@router.patch("/{job_id}/close")
def close_job(
    job_id: str,
    company: CurrentCompany,
    use_case: CloseJobUseCase = Depends(inject_use_case(container.close_job_use_case)),
) -> JobResponse:
    """Stop accepting applications for one of the authenticated company's jobs."""
    return JobResponse.from_entity(use_case.execute(job_id=job_id, company_id=str(company.id)))


@router.patch("/{job_id}/reopen")
def reopen_job(
    job_id: str,
    company: CurrentCompany,
    use_case: ReopenJobUseCase = Depends(inject_use_case(container.reopen_job_use_case)),
) -> JobResponse:
    """Accept applications again for one of the authenticated company's jobs."""
    return JobResponse.from_entity(use_case.execute(job_id=job_id, company_id=str(company.id)))


@router.get("/{job_id}/applications")
def list_job_applications(
    job_id: str,
    company: CurrentCompany,
    use_case: ListJobApplicationsUseCase = Depends(
        inject_use_case(container.list_job_applications_use_case)
    ),
) -> list[ApplicationResponse]:
    """List the applications to one of the authenticated company's jobs."""
    applications = use_case.execute(job_id=job_id, company_id=str(company.id))
    return [ApplicationResponse.from_entity(application) for application in applications]
