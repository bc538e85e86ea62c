"""Pydantic schemas for identity request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from vagaflow.domain.identity.entities.user import User


class UserCreateRequest(BaseModel):
    """Schema for creating a user account."""

    email: str | None = Field(None, description="Email address, case-insensitive")
    password: str | None = Field(None, description="Password, 6 to 72 characters")
    name: str | None = Field(None, description="Display name")
    role: str | None = Field(None, description="CANDIDATE or COMPANY")


class LoginRequest(BaseModel):
    """Schema for logging in with email and password."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: str
    email: str
    name: str
    role: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.to_primitive(),
            email=user.email.value,
            name=user.name,
            role=user.role.value,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Schema for login and registration responses."""

    user: UserResponse
    access_token: str
    token_type: str = Field(..., description="Always 'bearer'")
    expires_in: int = Field(..., description="Token lifetime in seconds")
