"""API routes for job applications."""

from fastapi import APIRouter, Depends, status

from vagaflow.application.recruitment.use_cases.accept_application_use_case import (
    AcceptApplicationUseCase,
)
from vagaflow.application.recruitment.use_cases.create_application_use_case import (
    CreateApplicationUseCase,
)
from vagaflow.application.recruitment.use_cases.list_my_applications_use_case import (
    ListMyApplicationsUseCase,
)
from vagaflow.application.recruitment.use_cases.reject_application_use_case import (
    RejectApplicationUseCase,
)
from vagaflow.core import container
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.profiles.dependencies import CurrentCandidate, CurrentCompany
from vagaflow.infrastructure.recruitment.schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
)


router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_application(
    request: ApplicationCreateRequest,
    candidate: CurrentCandidate,
    use_case: CreateApplicationUseCase = Depends(
        inject_use_case(container.create_application_use_case)
    ),
) -> ApplicationResponse:
    """
    Apply to a job as the authenticated candidate.

    Args:
        request: ID of the job to apply to
        candidate: Candidate profile of the authenticated user
        use_case: CreateApplicationUseCase injected via dependency container

    Returns:
        The new, PENDING application

    Raises:
        JobClosedError: The job no longer accepts applications
        JobNotFoundError: The job does not exist
        ApplicationAlreadyExistsError: The candidate already applied
    """
    application = use_case.execute(candidate_id=str(candidate.id), job_id=request.job_id or "")
    return ApplicationResponse.from_entity(application)


@router.get("/my-applications")
def list_my_applications(
    candidate: CurrentCandidate,
    use_case: ListMyApplicationsUseCase = Depends(
        inject_use_case(container.list_my_applications_use_case)
    ),
) -> list[ApplicationResponse]:
    """List the authenticated candidate's applications, newest first."""
    applications = use_case.execute(str(candidate.id))
    return [ApplicationResponse.from_entity(application) for application in applications]


@router.patch("/{application_id}/accept")
def accept_application(
    application_id: str,
    company: CurrentCompany,
    use_case: AcceptApplicationUseCase = Depends(
        inject_use_case(container.accept_application_use_case)
    ),
) -> ApplicationResponse:
    """Accept a pending application to one of the authenticated company's jobs."""
    application = use_case.execute(application_id=application_id, company_id=str(company.id))
    return ApplicationResponse.from_entity(application)


@router.patch("/{application_id}/reject")
def reject_application(
    application_id: str,
    company: CurrentCompany,
    use_case: RejectApplicationUseCase = Depends(
        inject_use_case(container.reject_application_use_case)
    ),
) -> ApplicationResponse:
    """Reject a pending application to one of the authenticated company's jobs."""
    application = use_case.execute(application_id=application_id, company_id=str(company.id))
    return ApplicationResponse.from_entity(application)
