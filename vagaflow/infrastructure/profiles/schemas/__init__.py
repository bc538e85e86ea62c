"""Profiles context schemas."""

from vagaflow.infrastructure.profiles.schemas.profile_schemas import (
    CandidateCreateRequest,
    CandidateResponse,
    CompanyCreateRequest,
    CompanyResponse,
)

__all__ = [
    "CandidateCreateRequest",
    "CandidateResponse",
    "CompanyCreateRequest",
    "CompanyResponse",
]
