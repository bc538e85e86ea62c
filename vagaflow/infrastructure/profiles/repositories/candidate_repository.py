"""Repository for Candidate domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vagaflow.domain.common.value_objects.ids import CandidateId, UserId
from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.domain.profiles.exceptions import (
    CandidateNotFoundError,
    CandidateProfileAlreadyExistsError,
)
from vagaflow.infrastructure.profiles.mappers.candidate_mapper import CandidateMapper
from vagaflow.models import Candidate as CandidateORM

logger = logging.getLogger(__name__)


class CandidateRepository:
    """Repository for Candidate domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CandidateMapper()

    def find_by_id(self, candidate_id: CandidateId) -> Candidate | None:
        orm_model = self.db.get(CandidateORM, candidate_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_id(self, user_id: UserId) -> Candidate | None:
        """
        Find the candidate profile owned by a user.

        Args:
            user_id: The owning user's ID

        Returns:
            Candidate entity if the user has a profile, None otherwise
        """
        stmt = select(CandidateORM).where(CandidateORM.user_id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_user_id(self, user_id: UserId) -> bool:
        stmt = select(CandidateORM.id).where(CandidateORM.user_id == user_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def save(self, candidate: Candidate) -> Candidate:
        """
        Insert a new candidate profile.

        Raises:
            CandidateProfileAlreadyExistsError: If the user already owns a profile
        """
        try:
            orm_model = self.mapper.to_orm(candidate)
            self.db.add(orm_model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "user_id" in str(e.orig):
                raise CandidateProfileAlreadyExistsError(candidate.user_id) from e
            raise
        self.db.refresh(orm_model)
        logger.info(f"Created candidate {orm_model.id} for user {orm_model.user_id}")
        return self.mapper.to_domain(orm_model)

    def update(self, candidate: Candidate) -> Candidate:
        orm_model = self.db.get(CandidateORM, candidate.id.value)
        if not orm_model:
            raise CandidateNotFoundError(candidate.id)
        self.mapper.to_orm(candidate, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, candidate_id: CandidateId) -> bool:
        orm_model = self.db.get(CandidateORM, candidate_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True
