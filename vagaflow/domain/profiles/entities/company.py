"""Company profile entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from vagaflow.domain.common.entity import Entity, utc_now
from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_objects.ids import CompanyId, UserId
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.user_role import UserRole

MIN_COMPANY_NAME_LENGTH = 2
MAX_COMPANY_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000


@dataclass(frozen=True, eq=False)
class Company(Entity[CompanyId]):
    """
    Employer profile attached to a COMPANY user.

    Business Rules:
    - One company profile per user (enforced at repository level)
    - Company name is trimmed, MIN_COMPANY_NAME_LENGTH to MAX_COMPANY_NAME_LENGTH characters
    - Description is optional, at most MAX_DESCRIPTION_LENGTH characters
    """

    id: CompanyId
    user_id: UserId
    company_name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.company_name or not self.company_name.strip():
            raise ValidationError("Company name cannot be empty", field="company_name")
        company_name = self.company_name.strip()
        if len(company_name) < MIN_COMPANY_NAME_LENGTH:
            raise ValidationError(
                f"Company name must be at least {MIN_COMPANY_NAME_LENGTH} characters",
                field="company_name",
                value=company_name,
            )
        if len(company_name) > MAX_COMPANY_NAME_LENGTH:
            raise ValidationError(
                f"Company name cannot exceed {MAX_COMPANY_NAME_LENGTH} characters",
                field="company_name",
            )
        object.__setattr__(self, "company_name", company_name)

        if self.description is not None:
            description = self.description.strip()
            if len(description) > MAX_DESCRIPTION_LENGTH:
                raise ValidationError(
                    f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                    field="description",
                )
            object.__setattr__(self, "description", description or None)

    @staticmethod
    def validate_user_role(user: User) -> None:
        """
        Ensure a user may own a company profile.

        Raises:
            ValidationError: If the user did not register as a company
        """
        if user.role != UserRole.COMPANY:
            raise ValidationError(
                "Only users with COMPANY role can create a company profile",
                field="role",
                value=user.role.value,
            )

    def update_company_name(self, company_name: str) -> "Company":
        """Return a copy of this profile with a new company name."""
        return replace(self, company_name=company_name, updated_at=utc_now())

    def update_description(self, description: str | None) -> "Company":
        """Return a copy of this profile with a new description."""
        return replace(self, description=description, updated_at=utc_now())

    def belongs_to_user(self, user_id: UserId) -> bool:
        """Check if this profile is owned by the given user."""
        return self.user_id == user_id

    @classmethod
    def create(
        cls, user_id: UserId, company_name: str, description: str | None = None
    ) -> "Company":
        """Create a new company profile."""
        now = utc_now()
        return cls(
            id=CompanyId.generate(),
            user_id=user_id,
            company_name=company_name,
            description=description,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CompanyId,
        user_id: UserId,
        company_name: str,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Company":
        """Reconstitute a company profile from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            company_name=company_name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
