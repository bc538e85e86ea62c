"""Use case for rejecting a pending application."""

import structlog

from vagaflow.application.recruitment.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)
from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.application.recruitment.use_cases.job_access import get_owned_job
from vagaflow.domain.common.value_objects.ids import ApplicationId, CompanyId
from vagaflow.domain.recruitment.entities.application import Application
from vagaflow.domain.recruitment.exceptions import ApplicationNotFoundError

logger = structlog.get_logger(__name__)


class RejectApplicationUseCase:
    """Use case for rejecting an application."""

    def __init__(
        self,
        application_repository: ApplicationRepositoryProtocol,
        job_repository: JobRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.application_repository = application_repository
        self.job_repository = job_repository

    def execute(self, application_id: str, company_id: str) -> Application:
        """
        Reject an application to a job posted by the requesting company.

        Args:
            application_id: Application to reject
            company_id: Company making the request

        Returns:
            The rejected application

        Raises:
            ApplicationNotFoundError: If the application does not exist
            JobNotFoundError: If the application's job no longer exists
            JobOwnershipError: If the job belongs to another company
            ValidationError: If the application is not PENDING
        """
        application = self.application_repository.find_by_id(
            ApplicationId.from_string(application_id, "application_id")
        )
        if not application:
            raise ApplicationNotFoundError(application_id)

        get_owned_job(
            self.job_repository,
            application.job_id,
            CompanyId.from_string(company_id, "company_id"),
            "You can only reject applications for your own jobs",
        )

        application = self.application_repository.update(application.reject())

        logger.info("application_rejected", application_id=application_id, company_id=company_id)

        return application
