from typing import Protocol

from vagaflow.domain.common.value_objects.ids import CandidateId, UserId
from vagaflow.domain.profiles.entities.candidate import Candidate


class CandidateRepositoryProtocol(Protocol):
    def find_by_id(self, candidate_id: CandidateId) -> Candidate | None: ...

    def find_by_user_id(self, user_id: UserId) -> Candidate | None: ...

    def exists_by_user_id(self, user_id: UserId) -> bool: ...

    def save(self, candidate: Candidate) -> Candidate:
        """Insert a new profile. Raises CandidateProfileAlreadyExistsError for a second one."""
        ...

    def update(self, candidate: Candidate) -> Candidate: ...

    def delete(self, candidate_id: CandidateId) -> bool: ...
