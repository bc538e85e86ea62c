"""Password hash value object."""

from dataclasses import dataclass
from typing import Protocol

from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_object import ValueObject

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 72
# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordHasher(Protocol):
    """Hashing capability the domain relies on. Implemented in infrastructure."""

    def hash_password(self, plain_password: str) -> str: ...

    def verify_password(self, plain_password: str, hashed_password: str) -> bool: ...


def validate_plain_password(plain_password: str | None) -> str:
    """
    Check a plaintext password against the password policy.

    Raises:
        ValidationError: If the password is empty, too short or too long
    """
    if not plain_password:
        raise ValidationError("Password cannot be empty", field="password")
    if len(plain_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters", field="password"
        )
    if len(plain_password) > MAX_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password cannot exceed {MAX_PASSWORD_LENGTH} characters", field="password"
        )
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes", field="password"
        )
    return plain_password


@dataclass(frozen=True, repr=False)
class PasswordHash(ValueObject):
    """
    Opaque password hash.

    Only the hash is ever held; the plaintext passes through create() and
    compare() without being stored. The repr never shows the hash.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("Password hash cannot be empty", field="password_hash")

    def __repr__(self) -> str:
        return "PasswordHash(<redacted>)"

    @classmethod
    def create(cls, plain_password: str | None, hasher: PasswordHasher) -> "PasswordHash":
        """
        Validate a plaintext password and hash it.

        Args:
            plain_password: Password as typed by the user
            hasher: Hashing capability (bcrypt in production)

        Returns:
            New PasswordHash

        Raises:
            ValidationError: If the password violates the password policy
        """
        password = validate_plain_password(plain_password)
        return cls(hasher.hash_password(password))

    @classmethod
    def from_hash(cls, stored_hash: str) -> "PasswordHash":
        """Rehydrate a hash loaded from storage."""
        return cls(stored_hash)

    def compare(self, plain_password: str, hasher: PasswordHasher) -> bool:
        """Check a plaintext password against this hash."""
        if not plain_password:
            return False
        return hasher.verify_password(plain_password, self.value)
