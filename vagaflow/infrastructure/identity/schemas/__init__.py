"""Identity context schemas."""

from vagaflow.infrastructure.identity.schemas.user_schemas import (
    AuthResponse,
    LoginRequest,
    UserCreateRequest,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "UserCreateRequest",
    "UserResponse",
]
