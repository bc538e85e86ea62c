"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Entities here are frozen snapshots: a state change returns a new instance
built with dataclasses.replace, which re-runs __post_init__ validation.

Example:
    @dataclass(frozen=True, eq=False)
    class Job(Entity[JobId]):
        id: JobId
        status: JobStatus

        def close(self) -> "Job":
            return replace(self, status=JobStatus.CLOSED, updated_at=utc_now())
"""

from abc import ABC
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import ValidationError
from .value_object import ValueObject


def utc_now() -> datetime:
    """Current timestamp in UTC."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a UUID.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class JobId(EntityId):
            pass

        job_id = JobId.generate()
        CandidateId(job_id.value) == job_id  # False, different types
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a new random identifier."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, raw: str | None, field: str = "id") -> Self:
        """
        Parse an identifier received from outside the domain.

        Raises:
            ValidationError: If the value is missing or not a valid UUID
        """
        if raw is None or not str(raw).strip():
            raise ValidationError(f"{field} is required", field=field)
        try:
            return cls(UUID(str(raw).strip()))
        except ValueError:
            raise ValidationError(f"Invalid {field}", field=field, value=raw) from None

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Immutable snapshots (transitions return a new instance)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType and be declared
    with @dataclass(frozen=True, eq=False) so identity equality is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
