"""Use case for applying to a job."""

import structlog

from vagaflow.application.profiles.protocols.candidate_repository import (
    CandidateRepositoryProtocol,
)
from vagaflow.application.recruitment.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)
from vagaflow.application.recruitment.protocols.job_repository import JobRepositoryProtocol
from vagaflow.domain.common.value_objects.ids import CandidateId, JobId
from vagaflow.domain.profiles.exceptions import CandidateNotFoundError
from vagaflow.domain.recruitment.entities.application import Application
from vagaflow.domain.recruitment.exceptions import (
    ApplicationAlreadyExistsError,
    JobClosedError,
    JobNotFoundError,
)

logger = structlog.get_logger(__name__)


class CreateApplicationUseCase:
    """Use case for applying to a job."""

    def __init__(
        self,
        candidate_repository: CandidateRepositoryProtocol,
        job_repository: JobRepositoryProtocol,
        application_repository: ApplicationRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.candidate_repository = candidate_repository
        self.job_repository = job_repository
        self.application_repository = application_repository

    def execute(self, candidate_id: str, job_id: str) -> Application:
        """
        Submit a PENDING application from a candidate to an open job.

        A closed job is reported before a duplicate application. The
        duplicate check here is backed by a unique constraint in storage,
        so two concurrent submissions cannot both succeed.

        Args:
            candidate_id: Candidate applying
            job_id: Job applied to

        Returns:
            Created application

        Raises:
            CandidateNotFoundError: If the candidate does not exist
            JobNotFoundError: If the job does not exist
            JobClosedError: If the job is closed
            ApplicationAlreadyExistsError: If the candidate already applied
        """
        applicant_id = CandidateId.from_string(candidate_id, "candidate_id")
        target_job_id = JobId.from_string(job_id, "job_id")

        if not self.candidate_repository.find_by_id(applicant_id):
            raise CandidateNotFoundError(candidate_id)

        job = self.job_repository.find_by_id(target_job_id)
        if not job:
            raise JobNotFoundError(job_id)
        if job.is_closed():
            raise JobClosedError

        if self.application_repository.exists_by_candidate_and_job(applicant_id, target_job_id):
            raise ApplicationAlreadyExistsError(candidate_id, job_id)

        application = Application.create(candidate_id=applicant_id, job_id=target_job_id)
        application = self.application_repository.save(application)

        logger.info(
            "application_created",
            application_id=str(application.id),
            candidate_id=candidate_id,
            job_id=job_id,
        )

        return application
