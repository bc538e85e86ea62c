"""User entity for identity management."""

from dataclasses import dataclass, replace
from datetime import datetime

from vagaflow.domain.common.entity import Entity, utc_now
from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.user_role import UserRole
from vagaflow.domain.identity.value_objects.email import Email
from vagaflow.domain.identity.value_objects.password_hash import PasswordHash, PasswordHasher

# Domain constraints
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


def normalize_name(name: str | None) -> str:
    """Trim a display name and check its length."""
    if not name or not name.strip():
        raise ValidationError("Name cannot be empty", field="name")
    name = name.strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Name must be at least {MIN_NAME_LENGTH} characters", field="name", value=name
        )
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name")
    return name


@dataclass(frozen=True, eq=False)
class User(Entity[UserId]):
    """
    User entity representing an account on the platform.

    Business Rules:
    - Email must be unique, case-insensitively (enforced at repository level)
    - Name is trimmed and between MIN_NAME_LENGTH and MAX_NAME_LENGTH characters
    - Role is chosen at registration and never changes
    - Only the password hash is held, never the plaintext
    """

    id: UserId
    email: Email
    password_hash: PasswordHash
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        object.__setattr__(self, "name", normalize_name(self.name))
        if not isinstance(self.role, UserRole):
            raise ValidationError("Invalid role", field="role", value=self.role)

    def is_candidate(self) -> bool:
        """Check if this user registered as a candidate."""
        return self.role == UserRole.CANDIDATE

    def is_company(self) -> bool:
        """Check if this user registered as a company."""
        return self.role == UserRole.COMPANY

    def verify_password(self, plain_password: str, hasher: PasswordHasher) -> bool:
        """Check a plaintext password against the stored hash."""
        return self.password_hash.compare(plain_password, hasher)

    def rename(self, name: str) -> "User":
        """
        Return a copy of this user with a new display name.

        Raises:
            ValidationError: If the name is invalid
        """
        return replace(self, name=name, updated_at=utc_now())

    @classmethod
    def create(
        cls, email: Email, password_hash: PasswordHash, name: str, role: UserRole
    ) -> "User":
        """
        Create a new user.

        Args:
            email: Normalized email address
            password_hash: Hash of the user's password
            name: Display name
            role: CANDIDATE or COMPANY

        Returns:
            New User instance

        Raises:
            ValidationError: If name or role is invalid
        """
        now = utc_now()
        return cls(
            id=UserId.generate(),
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: Email,
        password_hash: PasswordHash,
        name: str,
        role: UserRole,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )
