from typing import Protocol

from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.value_objects.email import Email


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_email(self, email: Email) -> User | None: ...

    def exists_by_email(self, email: Email) -> bool: ...

    def save(self, user: User) -> User:
        """Insert a new user. Raises EmailAlreadyExistsError on a duplicate email."""
        ...

    def update(self, user: User) -> User: ...

    def delete(self, user_id: UserId) -> bool: ...
