"""Identity domain exceptions."""

from vagaflow.domain.common.exceptions import ConflictError, NotFoundError, UnauthorizedError


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: object = None) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(ConflictError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already registered", {"email": email})
        self.email = email


class InvalidCredentialsError(UnauthorizedError):
    """Raised when authentication fails due to invalid credentials."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class RegistrationDisabledError(UnauthorizedError):
    """Raised when user registration is disabled by configuration."""

    def __init__(self) -> None:
        super().__init__("User registration is currently disabled")
