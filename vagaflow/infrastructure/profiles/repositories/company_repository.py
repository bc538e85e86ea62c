"""Repository for Company domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vagaflow.domain.common.value_objects.ids import CompanyId, UserId
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.domain.profiles.exceptions import (
    CompanyNotFoundError,
    CompanyProfileAlreadyExistsError,
)
from vagaflow.infrastructure.profiles.mappers.company_mapper import CompanyMapper
from vagaflow.models import Company as CompanyORM

logger = logging.getLogger(__name__)


class CompanyRepository:
    """Repository for Company domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CompanyMapper()

    def find_by_id(self, company_id: CompanyId) -> Company | None:
        orm_model = self.db.get(CompanyORM, company_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_id(self, user_id: UserId) -> Company | None:
        """
        Find the company profile owned by a user.

        Args:
            user_id: The owning user's ID

        Returns:
            Company entity if the user has a profile, None otherwise
        """
        stmt = select(CompanyORM).where(CompanyORM.user_id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_user_id(self, user_id: UserId) -> bool:
        stmt = select(CompanyORM.id).where(CompanyORM.user_id == user_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def save(self, company: Company) -> Company:
        """
        Insert a new company profile.

        Raises:
            CompanyProfileAlreadyExistsError: If the user already owns a profile
        """
        try:
            orm_model = self.mapper.to_orm(company)
            self.db.add(orm_model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "user_id" in str(e.orig):
                raise CompanyProfileAlreadyExistsError(company.user_id) from e
            raise
        self.db.refresh(orm_model)
        logger.info(f"Created company {orm_model.id} for user {orm_model.user_id}")
        return self.mapper.to_domain(orm_model)

    def update(self, company: Company) -> Company:
        orm_model = self.db.get(CompanyORM, company.id.value)
        if not orm_model:
            raise CompanyNotFoundError(company.id)
        self.mapper.to_orm(company, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, company_id: CompanyId) -> bool:
        orm_model = self.db.get(CompanyORM, company_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True
