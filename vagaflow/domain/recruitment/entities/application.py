"""Job application entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from vagaflow.domain.common.entity import Entity, utc_now
from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_objects.ids import ApplicationId, CandidateId, JobId
from vagaflow.domain.recruitment.application_status import (
    ApplicationStatus,
    can_transition_status,
)


@dataclass(frozen=True, eq=False)
class Application(Entity[ApplicationId]):
    """
    A candidate's application to a job.

    Business Rules:
    - New applications are PENDING
    - PENDING may become ACCEPTED or REJECTED; both are terminal
    - accept() and reject() are the only ways to change the status
    - At most one application per (candidate, job) (enforced at repository level)
    """

    id: ApplicationId
    candidate_id: CandidateId
    job_id: JobId
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not isinstance(self.status, ApplicationStatus):
            raise ValidationError("Invalid application status", field="status", value=self.status)

    def accept(self) -> "Application":
        """
        Accept this application.

        Raises:
            ValidationError: If the application is not PENDING
        """
        if not can_transition_status(self.status, ApplicationStatus.ACCEPTED):
            raise ValidationError(
                f"Cannot accept application with status {self.status}", field="status"
            )
        return replace(self, status=ApplicationStatus.ACCEPTED, updated_at=utc_now())

    def reject(self) -> "Application":
        """
        Reject this application.

        Raises:
            ValidationError: If the application is not PENDING
        """
        if not can_transition_status(self.status, ApplicationStatus.REJECTED):
            raise ValidationError(
                f"Cannot reject application with status {self.status}", field="status"
            )
        return replace(self, status=ApplicationStatus.REJECTED, updated_at=utc_now())

    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    def is_accepted(self) -> bool:
        return self.status == ApplicationStatus.ACCEPTED

    def is_rejected(self) -> bool:
        return self.status == ApplicationStatus.REJECTED

    def is_final(self) -> bool:
        """Terminal states cannot transition any further."""
        return self.is_accepted() or self.is_rejected()

    def belongs_to_candidate(self, candidate_id: CandidateId) -> bool:
        return self.candidate_id == candidate_id

    def is_for_job(self, job_id: JobId) -> bool:
        return self.job_id == job_id

    @classmethod
    def create(cls, candidate_id: CandidateId, job_id: JobId) -> "Application":
        """Submit a new application. New applications start PENDING."""
        now = utc_now()
        return cls(
            id=ApplicationId.generate(),
            candidate_id=candidate_id,
            job_id=job_id,
            status=ApplicationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ApplicationId,
        candidate_id: CandidateId,
        job_id: JobId,
        status: ApplicationStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Application":
        """Reconstitute an application from persistence."""
        return cls(
            id=id,
            candidate_id=candidate_id,
            job_id=job_id,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
