
from fastapi import APIRouter, Depends, Request
from starlette import status

from vagaflow.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from vagaflow.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from vagaflow.core import container
from vagaflow.domain.identity.exceptions import InvalidCredentialsError
from vagaflow.exceptions import InvalidLoginException
from vagaflow.infrastructure.common.di import inject_use_case
from vagaflow.infrastructure.common.rate_limit import limiter
from vagaflow.infrastructure.identity.schemas import (
    AuthResponse,
    LoginRequest,
    UserCreateRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
def register(
    request: Request,
    register_data: UserCreateRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> AuthResponse:
    """
    Register a new user account.

    Returns the created user and an access token for immediate login.
    """
    user, token = use_case.execute(
        email=register_data.email,
        password=register_data.password,
        name=register_data.name,
        role=register_data.role,
    )
    return AuthResponse(
        user=UserResponse.from_entity(user),
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
    )


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
def login(
    request: Request,
    credentials: LoginRequest,
    use_case: AuthenticateUserUseCase = Depends(
        inject_use_case(container.authenticate_user_use_case)
    ),
) -> AuthResponse:
    try:
        user, token = use_case.execute(credentials.email, credentials.password)
    except InvalidCredentialsError:
        raise InvalidLoginException from None
    return AuthResponse(
        user=UserResponse.from_entity(user),
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
    )
