"""Use case for creating a user account."""

import structlog

from vagaflow.application.identity.protocols.password_service import PasswordServiceProtocol
from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.domain.identity.entities.user import User, normalize_name
from vagaflow.domain.identity.exceptions import EmailAlreadyExistsError
from vagaflow.domain.identity.user_role import UserRole
from vagaflow.domain.identity.value_objects.email import Email
from vagaflow.domain.identity.value_objects.password_hash import (
    PasswordHash,
    validate_plain_password,
)

logger = structlog.get_logger(__name__)


class CreateUserUseCase:
    """Use case for creating a user account."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service

    def execute(
        self, email: str | None, password: str | None, name: str | None, role: str | None
    ) -> User:
        """
        Create a new user.

        All input is validated before the repository is touched. The email
        uniqueness check is case-insensitive because Email is normalized.

        Args:
            email: User's email address
            password: User's plain text password (will be hashed)
            name: Display name
            role: CANDIDATE or COMPANY

        Returns:
            Created user entity

        Raises:
            ValidationError: If any field is missing or malformed
            EmailAlreadyExistsError: If email is already registered
        """
        user_email = Email(email or "")
        user_role = UserRole.parse(role)
        user_name = normalize_name(name)
        validate_plain_password(password)

        if self.user_repository.exists_by_email(user_email):
            raise EmailAlreadyExistsError(str(user_email))

        password_hash = PasswordHash.create(password, self.password_service)
        user = User.create(
            email=user_email, password_hash=password_hash, name=user_name, role=user_role
        )
        user = self.user_repository.save(user)

        logger.info("user_created", user_id=str(user.id), role=user.role.value)

        return user
