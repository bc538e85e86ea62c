"""Recruitment context schemas."""

from vagaflow.infrastructure.recruitment.schemas.application_schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
)
from vagaflow.infrastructure.recruitment.schemas.job_schemas import (
    JobCreateRequest,
    JobListResponse,
    JobResponse,
    PaginationMeta,
)

__all__ = [
    "ApplicationCreateRequest",
    "ApplicationResponse",
    "JobCreateRequest",
    "JobListResponse",
    "JobResponse",
    "PaginationMeta",
]
