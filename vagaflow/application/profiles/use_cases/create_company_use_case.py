"""Use case for creating a company profile."""

import structlog

from vagaflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from vagaflow.application.profiles.protocols.company_repository import CompanyRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.exceptions import UserNotFoundError
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.domain.profiles.exceptions import CompanyProfileAlreadyExistsError

logger = structlog.get_logger(__name__)


class CreateCompanyUseCase:
    """Use case for creating a company profile."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        company_repository: CompanyRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.company_repository = company_repository

    def execute(
        self, user_id: str, company_name: str | None, description: str | None = None
    ) -> Company:
        """
        Create the company profile of a user.

        Args:
            user_id: Owner of the profile
            company_name: Public company name
            description: Optional company description

        Returns:
            Created company profile

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If the user is not a COMPANY or the input is invalid
            CompanyProfileAlreadyExistsError: If the user already has a profile
        """
        owner_id = UserId.from_string(user_id, "user_id")
        user = self.user_repository.find_by_id(owner_id)
        if not user:
            raise UserNotFoundError(user_id)

        Company.validate_user_role(user)

        if self.company_repository.exists_by_user_id(owner_id):
            raise CompanyProfileAlreadyExistsError(user_id)

        company = Company.create(
            user_id=owner_id, company_name=company_name or "", description=description
        )
        company = self.company_repository.save(company)

        logger.info("company_created", company_id=str(company.id), user_id=user_id)

        return company
