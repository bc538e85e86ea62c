"""Mapper for User ORM ↔ Domain conversion."""

from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.user_role import UserRole
from vagaflow.domain.identity.value_objects.email import Email
from vagaflow.domain.identity.value_objects.password_hash import PasswordHash
from vagaflow.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=Email(orm_model.email),
            password_hash=PasswordHash.from_hash(orm_model.password_hash),
            name=orm_model.name,
            role=UserRole(orm_model.role),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; role is immutable
            orm_model.email = domain_entity.email.value
            orm_model.password_hash = domain_entity.password_hash.value
            orm_model.name = domain_entity.name
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return UserORM(
            id=domain_entity.id.value,
            email=domain_entity.email.value,
            password_hash=domain_entity.password_hash.value,
            name=domain_entity.name,
            role=domain_entity.role.value,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
