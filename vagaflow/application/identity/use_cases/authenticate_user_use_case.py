"""Use case for authenticating a user with email and password."""

import structlog

from vagaflow.application.identity.protocols.password_service import PasswordServiceProtocol
from vagaflow.application.identity.protocols.token_service import (
    AccessToken,
    TokenServiceProtocol,
)
from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.exceptions import InvalidCredentialsError
from vagaflow.domain.identity.value_objects.email import Email

logger = structlog.get_logger(__name__)


class AuthenticateUserUseCase:
    """Use case for authentication operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def execute(self, email: str | None, password: str | None) -> tuple[User, AccessToken]:
        """
        Authenticate a user with email and password.

        Unknown email, malformed email and wrong password all fail the same way.

        Args:
            email: User's email address
            password: User's plain text password

        Returns:
            Tuple of (authenticated user, access token)

        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If credentials are invalid
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        try:
            user = self.user_repository.find_by_email(Email(email))
        except ValidationError:
            user = None

        # Use constant-time comparison to prevent timing attacks
        if not user:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError

        if not user.verify_password(password, self.password_service):
            raise InvalidCredentialsError

        token = self.token_service.create_access_token(str(user.id), user.role.value)

        logger.info("user_authenticated", user_id=str(user.id))

        return user, token
