"""Mapper for Company ORM ↔ Domain conversion."""

from vagaflow.domain.common.value_objects.ids import CompanyId, UserId
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.models import Company as CompanyORM


class CompanyMapper:
    """Mapper for Company ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CompanyORM) -> Company:
        """Convert ORM model to domain entity."""
        return Company.create_with_id(
            id=CompanyId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            company_name=orm_model.company_name,
            description=orm_model.description,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Company, orm_model: CompanyORM | None = None) -> CompanyORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.company_name = domain_entity.company_name
            orm_model.description = domain_entity.description
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return CompanyORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            company_name=domain_entity.company_name,
            description=domain_entity.description,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
