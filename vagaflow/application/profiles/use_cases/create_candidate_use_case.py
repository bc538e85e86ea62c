"""Use case for creating a candidate profile."""

import structlog

from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.application.profiles.protocols.candidate_repository import (
    CandidateRepositoryProtocol,
)
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.exceptions import UserNotFoundError
from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.domain.profiles.exceptions import CandidateProfileAlreadyExistsError

logger = structlog.get_logger(__name__)


class CreateCandidateUseCase:
    """Use case for creating a candidate profile."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        candidate_repository: CandidateRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.candidate_repository = candidate_repository

    def execute(self, user_id: str, resume: str | None = None) -> Candidate:
        """
        Create the candidate profile of a user.

        Args:
            user_id: Owner of the profile
            resume: Optional resume text

        Returns:
            Created candidate profile

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If the user is not a CANDIDATE or the resume is too long
            CandidateProfileAlreadyExistsError: If the user already has a profile
        """
        owner_id = UserId.from_string(user_id, "user_id")
        user = self.user_repository.find_by_id(owner_id)
        if not user:
            raise UserNotFoundError(user_id)

        Candidate.validate_user_role(user)

        if self.candidate_repository.exists_by_user_id(owner_id):
            raise CandidateProfileAlreadyExistsError(user_id)

        candidate = Candidate.create(user_id=owner_id, resume=resume)
        candidate = self.candidate_repository.save(candidate)

        logger.info("candidate_created", candidate_id=str(candidate.id), user_id=user_id)

        return candidate
