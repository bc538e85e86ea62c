"""Use case for getting a user by ID (used internally by dependency injection)."""

from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.exceptions import UserNotFoundError


class GetUserByIdUseCase:
    """Use case for getting a user by ID."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def execute(self, user_id: str) -> User:
        """
        Get a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User entity

        Raises:
            ValidationError: If the ID is malformed
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId.from_string(user_id, "user_id"))
        if not user:
            raise UserNotFoundError(user_id)
        return user
