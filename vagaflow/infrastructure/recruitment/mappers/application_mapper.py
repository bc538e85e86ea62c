"""Mapper for Application ORM ↔ Domain conversion."""

from vagaflow.domain.common.value_objects.ids import ApplicationId, CandidateId, JobId
from vagaflow.domain.recruitment.application_status import ApplicationStatus
from vagaflow.domain.recruitment.entities.application import Application
from vagaflow.models import Application as ApplicationORM


class ApplicationMapper:
    """Mapper for Application ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ApplicationORM) -> Application:
        """Convert ORM model to domain entity."""
        return Application.create_with_id(
            id=ApplicationId(orm_model.id),
            candidate_id=CandidateId(orm_model.candidate_id),
            job_id=JobId(orm_model.job_id),
            status=ApplicationStatus(orm_model.status),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Application, orm_model: ApplicationORM | None = None
    ) -> ApplicationORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Only the status moves after creation
            orm_model.status = domain_entity.status.value
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return ApplicationORM(
            id=domain_entity.id.value,
            candidate_id=domain_entity.candidate_id.value,
            job_id=domain_entity.job_id.value,
            status=domain_entity.status.value,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
