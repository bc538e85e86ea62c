from typing import Protocol

from vagaflow.domain.common.value_objects.ids import CompanyId, UserId
from vagaflow.domain.profiles.entities.company import Company


class CompanyRepositoryProtocol(Protocol):
    def find_by_id(self, company_id: CompanyId) -> Company | None: ...

    def find_by_user_id(self, user_id: UserId) -> Company | None: ...

    def exists_by_user_id(self, user_id: UserId) -> bool: ...

    def save(self, company: Company) -> Company:
        """Insert a new profile. Raises CompanyProfileAlreadyExistsError for a second one."""
        ...

    def update(self, company: Company) -> Company: ...

    def delete(self, company_id: CompanyId) -> bool: ...
