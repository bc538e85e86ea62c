"""Repository for Application domain entities."""

import logging

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vagaflow.domain.common.value_objects.ids import ApplicationId, CandidateId, CompanyId, JobId
from vagaflow.domain.recruitment.application_status import ApplicationStatus
from vagaflow.domain.recruitment.entities.application import Application
from vagaflow.domain.recruitment.exceptions import (
    ApplicationAlreadyExistsError,
    ApplicationNotFoundError,
)
from vagaflow.infrastructure.recruitment.mappers.application_mapper import ApplicationMapper
from vagaflow.models import Application as ApplicationORM
from vagaflow.models import Job as JobORM

logger = logging.getLogger(__name__)


class ApplicationRepository:
    """Repository for Application domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ApplicationMapper()

    def find_by_id(self, application_id: ApplicationId) -> Application | None:
        orm_model = self.db.get(ApplicationORM, application_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_candidate_id(self, candidate_id: CandidateId) -> list[Application]:
        """
        Get all applications a candidate submitted.

        Returns:
            List of application entities ordered by created_at DESC
        """
        stmt = (
            select(ApplicationORM)
            .where(ApplicationORM.candidate_id == candidate_id.value)
            .order_by(ApplicationORM.created_at.desc())
        )
        return self._to_domain_list(stmt)

    def find_by_job_id(self, job_id: JobId) -> list[Application]:
        """
        Get all applications to a job.

        Returns:
            List of application entities ordered by created_at DESC
        """
        stmt = (
            select(ApplicationORM)
            .where(ApplicationORM.job_id == job_id.value)
            .order_by(ApplicationORM.created_at.desc())
        )
        return self._to_domain_list(stmt)

    def find_by_company_id(self, company_id: CompanyId) -> list[Application]:
        """Get all applications to jobs posted by a company."""
        stmt = (
            select(ApplicationORM)
            .join(JobORM, ApplicationORM.job_id == JobORM.id)
            .where(JobORM.company_id == company_id.value)
            .order_by(ApplicationORM.created_at.desc())
        )
        return self._to_domain_list(stmt)

    def find_by_status(self, status: ApplicationStatus) -> list[Application]:
        stmt = (
            select(ApplicationORM)
            .where(ApplicationORM.status == status.value)
            .order_by(ApplicationORM.created_at.desc())
        )
        return self._to_domain_list(stmt)

    def exists_by_candidate_and_job(self, candidate_id: CandidateId, job_id: JobId) -> bool:
        stmt = select(ApplicationORM.id).where(
            ApplicationORM.candidate_id == candidate_id.value,
            ApplicationORM.job_id == job_id.value,
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def save(self, application: Application) -> Application:
        """
        Insert a new application.

        The unique constraint on (candidate_id, job_id) is the final word on
        duplicates, covering submissions that race past the existence check.

        Raises:
            ApplicationAlreadyExistsError: If the candidate already applied to the job
        """
        try:
            orm_model = self.mapper.to_orm(application)
            self.db.add(orm_model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "uq_application_candidate_job" in str(e.orig) or "candidate_id" in str(e.orig):
                raise ApplicationAlreadyExistsError(
                    application.candidate_id, application.job_id
                ) from e
            raise
        self.db.refresh(orm_model)
        logger.info(f"Created application {orm_model.id} for job {orm_model.job_id}")
        return self.mapper.to_domain(orm_model)

    def update(self, application: Application) -> Application:
        """
        Persist a status change.

        Raises:
            ApplicationNotFoundError: If the application does not exist
        """
        orm_model = self.db.get(ApplicationORM, application.id.value)
        if not orm_model:
            raise ApplicationNotFoundError(application.id)
        self.mapper.to_orm(application, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Application {orm_model.id} is now {orm_model.status}")
        return self.mapper.to_domain(orm_model)

    def delete(self, application_id: ApplicationId) -> bool:
        orm_model = self.db.get(ApplicationORM, application_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True

    def _to_domain_list(self, stmt: Select[tuple[ApplicationORM]]) -> list[Application]:
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
