"""Use case for user registration."""

import structlog

from vagaflow.application.identity.protocols.token_service import (
    AccessToken,
    TokenServiceProtocol,
)
from vagaflow.application.identity.use_cases.create_user_use_case import CreateUserUseCase
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.exceptions import RegistrationDisabledError
from vagaflow.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        create_user_use_case: CreateUserUseCase,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.create_user_use_case = create_user_use_case
        self.token_service = token_service

    def execute(
        self, email: str | None, password: str | None, name: str | None, role: str | None
    ) -> tuple[User, AccessToken]:
        """
        Register a new user account.

        Args:
            email: User's email address
            password: User's plain text password (will be hashed)
            name: Display name
            role: CANDIDATE or COMPANY

        Returns:
            Tuple of (created user, access token for immediate login)

        Raises:
            RegistrationDisabledError: If registration is disabled by configuration
            ValidationError: If any field is missing or malformed
            EmailAlreadyExistsError: If email is already registered
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        user = self.create_user_use_case.execute(email, password, name, role)
        token = self.token_service.create_access_token(str(user.id), user.role.value)

        logger.info("user_registered", user_id=str(user.id))

        return user, token
