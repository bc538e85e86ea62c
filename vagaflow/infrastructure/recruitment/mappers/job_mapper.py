"""Mapper for Job ORM ↔ Domain conversion."""

from vagaflow.domain.common.value_objects.ids import CompanyId, JobId
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.job_status import JobStatus
from vagaflow.domain.recruitment.value_objects.job_title import JobTitle
from vagaflow.models import Job as JobORM


class JobMapper:
    """Mapper for Job ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: JobORM) -> Job:
        """Convert ORM model to domain entity."""
        return Job.create_with_id(
            id=JobId(orm_model.id),
            company_id=CompanyId(orm_model.company_id),
            title=JobTitle(orm_model.title),
            description=orm_model.description,
            status=JobStatus(orm_model.status),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Job, orm_model: JobORM | None = None) -> JobORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.title = domain_entity.title.value
            orm_model.description = domain_entity.description
            orm_model.status = domain_entity.status.value
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return JobORM(
            id=domain_entity.id.value,
            company_id=domain_entity.company_id.value,
            title=domain_entity.title.value,
            description=domain_entity.description,
            status=domain_entity.status.value,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
