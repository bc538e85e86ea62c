"""Use case for a candidate's own applications."""

from vagaflow.application.recruitment.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)
from vagaflow.domain.common.value_objects.ids import CandidateId
from vagaflow.domain.recruitment.entities.application import Application


class ListMyApplicationsUseCase:
    """Use case for listing the applications a candidate submitted."""

    def __init__(self, application_repository: ApplicationRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.application_repository = application_repository

    def execute(self, candidate_id: str) -> list[Application]:
        return self.application_repository.find_by_candidate_id(
            CandidateId.from_string(candidate_id, "candidate_id")
        )
