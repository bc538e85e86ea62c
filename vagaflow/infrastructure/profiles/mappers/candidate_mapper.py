"""Mapper for Candidate ORM ↔ Domain conversion."""

from vagaflow.domain.common.value_objects.ids import CandidateId, UserId
from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.models import Candidate as CandidateORM


class CandidateMapper:
    """Mapper for Candidate ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CandidateORM) -> Candidate:
        """Convert ORM model to domain entity."""
        return Candidate.create_with_id(
            id=CandidateId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            resume=orm_model.resume,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Candidate, orm_model: CandidateORM | None = None
    ) -> CandidateORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.resume = domain_entity.resume
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return CandidateORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            resume=domain_entity.resume,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
