"""Repository for Job domain entities."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from vagaflow.application.common.pagination import Pagination
from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.exceptions import JobNotFoundError
from vagaflow.domain.recruitment.job_status import JobStatus
from vagaflow.infrastructure.recruitment.mappers.job_mapper import JobMapper
from vagaflow.models import Job as JobORM

logger = logging.getLogger(__name__)


class JobRepository:
    """Repository for Job domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = JobMapper()

    def find_by_id(self, job_id: JobId) -> Job | None:
        """
        Find a job by ID.

        Args:
            job_id: The job ID

        Returns:
            Job entity if found, None otherwise
        """
        orm_model = self.db.get(JobORM, job_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_company_id(self, company_id: CompanyId) -> list[Job]:
        """
        Get all jobs posted by a company, any status.

        Returns:
            List of job entities ordered by created_at DESC
        """
        stmt = (
            select(JobORM)
            .where(JobORM.company_id == company_id.value)
            .order_by(JobORM.created_at.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_status(self, status: JobStatus) -> list[Job]:
        stmt = (
            select(JobORM).where(JobORM.status == status.value).order_by(JobORM.created_at.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_all_open(self) -> list[Job]:
        return self.find_by_status(JobStatus.OPEN)

    def find_all_open_paginated(self, pagination: Pagination) -> tuple[list[Job], int]:
        """
        Get one page of open jobs.

        Args:
            pagination: Page and page size

        Returns:
            Tuple of (jobs on the page ordered by created_at DESC, total open jobs)
        """
        stmt = (
            select(JobORM)
            .where(JobORM.status == JobStatus.OPEN.value)
            .order_by(JobORM.created_at.desc(), JobORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        jobs = [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
        return jobs, self.count_open()

    def count_open(self) -> int:
        """Count jobs currently accepting applications."""
        stmt = select(func.count(JobORM.id)).where(JobORM.status == JobStatus.OPEN.value)
        return self.db.execute(stmt).scalar() or 0

    def save(self, job: Job) -> Job:
        """Insert a new job."""
        orm_model = self.mapper.to_orm(job)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Created job {orm_model.id} for company {orm_model.company_id}")
        return self.mapper.to_domain(orm_model)

    def update(self, job: Job) -> Job:
        """
        Persist changes to an existing job.

        Raises:
            JobNotFoundError: If the job does not exist
        """
        orm_model = self.db.get(JobORM, job.id.value)
        if not orm_model:
            raise JobNotFoundError(job.id)
        self.mapper.to_orm(job, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, job_id: JobId) -> bool:
        """
        Delete a job and its applications.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(JobORM, job_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True
