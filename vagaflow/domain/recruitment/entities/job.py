"""Job posting entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from vagaflow.domain.common.entity import Entity, utc_now
from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.job_status import JobStatus
from vagaflow.domain.recruitment.value_objects.job_title import JobTitle

MIN_DESCRIPTION_LENGTH = 10
MAX_DESCRIPTION_LENGTH = 5000


@dataclass(frozen=True, eq=False)
class Job(Entity[JobId]):
    """
    Job opening posted by a company.

    Business Rules:
    - Description is trimmed, MIN_DESCRIPTION_LENGTH to MAX_DESCRIPTION_LENGTH characters
    - New jobs are OPEN; only OPEN jobs accept applications
    - close() on a CLOSED job and reopen() on an OPEN job are errors
    """

    id: JobId
    company_id: CompanyId
    title: JobTitle
    description: str
    status: JobStatus
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.description or not self.description.strip():
            raise ValidationError("Job description cannot be empty", field="description")
        description = self.description.strip()
        if len(description) < MIN_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Job description must be at least {MIN_DESCRIPTION_LENGTH} characters",
                field="description",
            )
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Job description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                field="description",
            )
        object.__setattr__(self, "description", description)
        if not isinstance(self.status, JobStatus):
            raise ValidationError("Invalid job status", field="status", value=self.status)

    def is_open(self) -> bool:
        return self.status == JobStatus.OPEN

    def is_closed(self) -> bool:
        return self.status == JobStatus.CLOSED

    def close(self) -> "Job":
        """
        Stop accepting applications.

        Raises:
            ValidationError: If the job is already closed
        """
        if self.is_closed():
            raise ValidationError("Job is already closed", field="status")
        return replace(self, status=JobStatus.CLOSED, updated_at=utc_now())

    def reopen(self) -> "Job":
        """
        Accept applications again.

        Raises:
            ValidationError: If the job is already open
        """
        if self.is_open():
            raise ValidationError("Job is already open", field="status")
        return replace(self, status=JobStatus.OPEN, updated_at=utc_now())

    def update_title(self, title: JobTitle) -> "Job":
        return replace(self, title=title, updated_at=utc_now())

    def update_description(self, description: str) -> "Job":
        return replace(self, description=description, updated_at=utc_now())

    def belongs_to_company(self, company_id: CompanyId) -> bool:
        """Check if this job was posted by the given company."""
        return self.company_id == company_id

    @classmethod
    def create(cls, company_id: CompanyId, title: JobTitle, description: str) -> "Job":
        """
        Post a new job. New jobs start OPEN.

        Raises:
            ValidationError: If the description is invalid
        """
        now = utc_now()
        return cls(
            id=JobId.generate(),
            company_id=company_id,
            title=title,
            description=description,
            status=JobStatus.OPEN,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: JobId,
        company_id: CompanyId,
        title: JobTitle,
        description: str,
        status: JobStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Job":
        """Reconstitute a job from persistence."""
        return cls(
            id=id,
            company_id=company_id,
            title=title,
            description=description,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
