"""Pydantic schemas for Job API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from vagaflow.application.common.pagination import PaginatedResult
from vagaflow.domain.recruitment.entities.job import Job


class JobCreateRequest(BaseModel):
    """Schema for posting a job."""

    title: str | None = Field(None, description="Job title, 3 to 100 characters")
    description: str | None = Field(None, description="Job description, 10 to 5000 characters")


class JobResponse(BaseModel):
    """Schema for a job."""

    id: str
    company_id: str
    title: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id.to_primitive(),
            company_id=job.company_id.to_primitive(),
            title=job.title.value,
            description=job.description,
            status=job.status.value,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class PaginationMeta(BaseModel):
    """Pagination metadata returned with list responses."""

    page: int
    limit: int
    total: int
    total_pages: int


class JobListResponse(BaseModel):
    """Schema for one page of open jobs."""

    data: list[JobResponse] = Field(..., description="Jobs on this page, newest first")
    pagination: PaginationMeta

    @classmethod
    def from_result(cls, result: PaginatedResult[Job]) -> "JobListResponse":
        return cls(
            data=[JobResponse.from_entity(job) for job in result.items],
            pagination=PaginationMeta(
                page=result.page,
                limit=result.limit,
                total=result.total,
                total_pages=result.total_pages,
            ),
        )
