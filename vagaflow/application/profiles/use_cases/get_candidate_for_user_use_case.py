"""Use case resolving the candidate profile that acts for a user."""

from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.application.profiles.protocols.candidate_repository import (
    CandidateRepositoryProtocol,
)
from vagaflow.domain.common.exceptions import UnauthorizedError
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.exceptions import UserNotFoundError
from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.domain.profiles.exceptions import CandidateProfileMissingError


class GetCandidateForUserUseCase:
    """Resolve an authenticated user to their own candidate profile."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        candidate_repository: CandidateRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.candidate_repository = candidate_repository

    def execute(self, user_id: str) -> Candidate:
        """
        Get the candidate profile owned by a user.

        Args:
            user_id: ID of the authenticated user

        Returns:
            The user's candidate profile

        Raises:
            UserNotFoundError: If the user does not exist
            UnauthorizedError: If the user is not a CANDIDATE
            CandidateProfileMissingError: If the profile has not been created yet
        """
        owner_id = UserId.from_string(user_id, "user_id")
        user = self.user_repository.find_by_id(owner_id)
        if not user:
            raise UserNotFoundError(user_id)
        if not user.is_candidate():
            raise UnauthorizedError("Only candidates can perform this action")

        candidate = self.candidate_repository.find_by_user_id(owner_id)
        if not candidate:
            raise CandidateProfileMissingError
        return candidate
