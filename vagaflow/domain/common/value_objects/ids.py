from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class CandidateId(EntityId):
    """Strongly-typed candidate profile identifier."""


@dataclass(frozen=True)
class CompanyId(EntityId):
    """Strongly-typed company profile identifier."""


@dataclass(frozen=True)
class JobId(EntityId):
    """Strongly-typed job identifier."""


@dataclass(frozen=True)
class ApplicationId(EntityId):
    """Strongly-typed application identifier."""
