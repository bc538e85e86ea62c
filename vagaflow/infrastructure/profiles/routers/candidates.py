"""API routes for candidate profiles."""

from fastapi import APIRouter, Depends, status

from vagaflow.application.profiles.use_cases.create_candidate_use_case import (
    CreateCandidateUseCase,
)
from vagaflow.core import container
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.identity.dependencies import CurrentUser
from vagaflow.infrastructure.profiles.dependencies import CurrentCandidate
from vagaflow.infrastructure.profiles.schemas import CandidateCreateRequest, CandidateResponse


router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_candidate(
    request: CandidateCreateRequest,
    current_user: CurrentUser,
    use_case: CreateCandidateUseCase = Depends(
        inject_use_case(container.create_candidate_use_case)
    ),
) -> CandidateResponse:
    """
    Create the candidate profile of the authenticated user.

    Args:
        request: Optional resume
        current_user: Authenticated user, who must have the CANDIDATE role
        use_case: CreateCandidateUseCase injected via dependency container

    Returns:
        Created candidate profile
    """
    candidate = use_case.execute(user_id=str(current_user.id), resume=request.resume)
    return CandidateResponse.from_entity(candidate)


@router.get("/me")
def get_my_candidate_profile(candidate: CurrentCandidate) -> CandidateResponse:
    """Get the authenticated user's candidate profile."""
    return CandidateResponse.from_entity(candidate)
