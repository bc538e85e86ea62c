"""Candidate profile entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from vagaflow.domain.common.entity import Entity, utc_now
from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_objects.ids import CandidateId, UserId
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.user_role import UserRole

MAX_RESUME_LENGTH = 5000


@dataclass(frozen=True, eq=False)
class Candidate(Entity[CandidateId]):
    """
    Job-seeker profile attached to a CANDIDATE user.

    Business Rules:
    - One candidate profile per user (enforced at repository level)
    - Resume is optional free text, at most MAX_RESUME_LENGTH characters
    """

    id: CandidateId
    user_id: UserId
    resume: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        resume = (self.resume or "").strip()
        if len(resume) > MAX_RESUME_LENGTH:
            raise ValidationError(
                f"Resume cannot exceed {MAX_RESUME_LENGTH} characters", field="resume"
            )
        object.__setattr__(self, "resume", resume)

    @staticmethod
    def validate_user_role(user: User) -> None:
        """
        Ensure a user may own a candidate profile.

        Raises:
            ValidationError: If the user did not register as a candidate
        """
        if user.role != UserRole.CANDIDATE:
            raise ValidationError(
                "Only users with CANDIDATE role can create a candidate profile",
                field="role",
                value=user.role.value,
            )

    def update_resume(self, resume: str | None) -> "Candidate":
        """Return a copy of this profile with a new resume."""
        return replace(self, resume=resume or "", updated_at=utc_now())

    def belongs_to_user(self, user_id: UserId) -> bool:
        """Check if this profile is owned by the given user."""
        return self.user_id == user_id

    @classmethod
    def create(cls, user_id: UserId, resume: str | None = None) -> "Candidate":
        """Create a new candidate profile."""
        now = utc_now()
        return cls(
            id=CandidateId.generate(),
            user_id=user_id,
            resume=resume or "",
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CandidateId,
        user_id: UserId,
        resume: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Candidate":
        """Reconstitute a candidate profile from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            resume=resume or "",
            created_at=created_at,
            updated_at=updated_at,
        )
