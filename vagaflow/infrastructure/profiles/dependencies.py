"""FastAPI dependencies resolving the caller's own profile."""

from typing import Annotated

from fastapi import Depends

from vagaflow.application.profiles.use_cases.get_candidate_for_user_use_case import (
    GetCandidateForUserUseCase,
)
from vagaflow.application.profiles.use_cases.get_company_for_user_use_case import (
    GetCompanyForUserUseCase,
)
from vagaflow.core import container
from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.identity.dependencies import CurrentUser


def get_current_candidate(
    current_user: CurrentUser,
    use_case: GetCandidateForUserUseCase = Depends(
        inject_use_case(container.get_candidate_for_user_use_case)
    ),
) -> Candidate:
    """
    Resolve the authenticated user to their candidate profile.

    Raises:
        UnauthorizedError: If the user is not a CANDIDATE
        CandidateProfileMissingError: If the profile has not been created yet
    """
    return use_case.execute(str(current_user.id))


def get_current_company(
    current_user: CurrentUser,
    use_case: GetCompanyForUserUseCase = Depends(
        inject_use_case(container.get_company_for_user_use_case)
    ),
) -> Company:
    """
    Resolve the authenticated user to their company profile.

    Raises:
        UnauthorizedError: If the user is not a COMPANY
        CompanyProfileMissingError: If the profile has not been created yet
    """
    return use_case.execute(str(current_user.id))


CurrentCandidate = Annotated[Candidate, Depends(get_current_candidate)]
CurrentCompany = Annotated[Company, Depends(get_current_company)]
