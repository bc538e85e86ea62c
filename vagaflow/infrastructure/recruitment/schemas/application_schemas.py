"""Pydantic schemas for Application API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from vagaflow.domain.recruitment.entities.application import Application


class ApplicationCreateRequest(BaseModel):
    """Schema for applying to a job."""

    job_id: str | None = Field(None, description="Job to apply to")


class ApplicationResponse(BaseModel):
    """Schema for an application."""

    id: str
    candidate_id: str
    job_id: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=application.id.to_primitive(),
            candidate_id=application.candidate_id.to_primitive(),
            job_id=application.job_id.to_primitive(),
            status=application.status.value,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
