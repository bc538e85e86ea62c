"""Pydantic schemas for candidate and company profiles."""

from datetime import datetime

from pydantic import BaseModel, Field

from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.domain.profiles.entities.company import Company


class CandidateCreateRequest(BaseModel):
    """Schema for creating the caller's candidate profile."""

    resume: str | None = Field(None, description="Optional resume text, up to 5000 characters")


class CandidateResponse(BaseModel):
    """Schema for a candidate profile."""

    id: str
    user_id: str
    resume: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, candidate: Candidate) -> "CandidateResponse":
        return cls(
            id=candidate.id.to_primitive(),
            user_id=candidate.user_id.to_primitive(),
            resume=candidate.resume,
            created_at=candidate.created_at,
            updated_at=candidate.updated_at,
        )


class CompanyCreateRequest(BaseModel):
    """Schema for creating the caller's company profile."""

    company_name: str | None = Field(None, description="Public company name")
    description: str | None = Field(None, description="Optional description, up to 1000 chars")


class CompanyResponse(BaseModel):
    """Schema for a company profile."""

    id: str
    user_id: str
    company_name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id.to_primitive(),
            user_id=company.user_id.to_primitive(),
            company_name=company.company_name,
            description=company.description,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )
