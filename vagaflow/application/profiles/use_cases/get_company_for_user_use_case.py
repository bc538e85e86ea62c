"""Use case resolving the company profile that acts for a user."""

from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.application.profiles.protocols.company_repository import CompanyRepositoryProtocol
from vagaflow.domain.common.exceptions import UnauthorizedError
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.exceptions import UserNotFoundError
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.domain.profiles.exceptions import CompanyProfileMissingError


class GetCompanyForUserUseCase:
    """Resolve an authenticated user to their own company profile."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        company_repository: CompanyRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.company_repository = company_repository

    def execute(self, user_id: str) -> Company:
        """
        Get the company profile owned by a user.

        Raises:
            UserNotFoundError: If the user does not exist
            UnauthorizedError: If the user is not a COMPANY
            CompanyProfileMissingError: If the profile has not been created yet
        """
        owner_id = UserId.from_string(user_id, "user_id")
        user = self.user_repository.find_by_id(owner_id)
        if not user:
            raise UserNotFoundError(user_id)
        if not user.is_company():
            raise UnauthorizedError("Only companies can perform this action")

        company = self.company_repository.find_by_user_id(owner_id)
        if not company:
            raise CompanyProfileMissingError
        return company
