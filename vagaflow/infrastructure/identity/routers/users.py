
from fastapi import APIRouter, Depends, Request, status

from vagaflow.application.identity.use_cases.create_user_use_case import CreateUserUseCase
from vagaflow.core import container
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.common.rate_limit import limiter
from vagaflow.infrastructure.identity.dependencies import CurrentUser
from vagaflow.infrastructure.identity.schemas import UserCreateRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
def create_user(
    request: Request,
    user_data: UserCreateRequest,
    use_case: CreateUserUseCase = Depends(inject_use_case(container.create_user_use_case)),
) -> UserResponse:
    """
    Create a user account without logging in.

    Unlike /auth/register this does not issue a token.
    """
    user = use_case.execute(
        email=user_data.email,
        password=user_data.password,
        name=user_data.name,
        role=user_data.role,
    )
    return UserResponse.from_entity(user)


@router.get("/me")
def get_me(current_user: CurrentUser) -> UserResponse:
    """Get the authenticated user."""
    return UserResponse.from_entity(current_user)
