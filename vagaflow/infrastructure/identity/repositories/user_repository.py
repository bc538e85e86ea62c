"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from vagaflow.domain.identity.value_objects.email import Email
from vagaflow.infrastructure.identity.mappers.user_mapper import UserMapper
from vagaflow.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: Email) -> User | None:
        """
        Find a user by normalized email.

        Args:
            email: The user's email address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.email == email.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_email(self, email: Email) -> bool:
        """Check if an email is already registered."""
        stmt = select(UserORM.id).where(UserORM.email == email.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def save(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The user entity to save

        Returns:
            Saved user entity

        Raises:
            EmailAlreadyExistsError: If email is already registered
        """
        try:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # Check if it's a unique constraint violation on email
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(user.email.value) from e
            raise
        self.db.refresh(orm_model)
        logger.info(f"Created user {orm_model.id} with role {orm_model.role}")
        return self.mapper.to_domain(orm_model)

    def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        orm_model = self.db.get(UserORM, user.id.value)
        if not orm_model:
            raise UserNotFoundError(user.id)
        self.mapper.to_orm(user, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated user {user.id}")
        return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId) -> bool:
        """
        Delete a user and, through cascades, their profiles.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(UserORM, user_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True
