"""API routes for company profiles."""

from fastapi import APIRouter, Depends, status

from vagaflow.application.profiles.use_cases.create_company_use_case import CreateCompanyUseCase
from vagaflow.application.recruitment.use_cases.list_company_jobs_use_case import (
    ListCompanyJobsUseCase,
)
from vagaflow.core import container
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.identity.dependencies import CurrentUser
from vagaflow.infrastructure.profiles.dependencies import CurrentCompany
from vagaflow.infrastructure.profiles.schemas import CompanyCreateRequest, CompanyResponse
from vagaflow.infrastructure.recruitment.schemas import JobResponse


router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_company(
    request: CompanyCreateRequest,
    current_user: CurrentUser,
    use_case: CreateCompanyUseCase = Depends(inject_use_case(container.create_company_use_case)),
) -> CompanyResponse:
    """
    Create the company profile of the authenticated user.

    Args:
        request: Company name and optional description
        current_user: Authenticated user, who must have the COMPANY role
        use_case: CreateCompanyUseCase injected via dependency container

    Returns:
        Created company profile
    """
    company = use_case.execute(
        user_id=str(current_user.id),
        company_name=request.company_name,
        description=request.description,
    )
    return CompanyResponse.from_entity(company)


@router.get("/me")
def get_my_company_profile(company: CurrentCompany) -> CompanyResponse:
    """Get the authenticated user's company profile."""
    return CompanyResponse.from_entity(company)


@router.get("/me/jobs")
def list_my_company_jobs(
    company: CurrentCompany,
    use_case: ListCompanyJobsUseCase = Depends(
        inject_use_case(container.list_company_jobs_use_case)
    ),
) -> list[JobResponse]:
    """List every job the authenticated company posted, open and closed."""
    return [JobResponse.from_entity(job) for job in use_case.execute(str(company.id))]
