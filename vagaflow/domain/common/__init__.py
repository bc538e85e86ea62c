"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- DomainError hierarchy tagged with an ErrorKind
"""

from .entity import Entity, EntityId, utc_now
from .exceptions import (
    ConflictError,
    DomainError,
    ErrorKind,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "ConflictError",
    "DomainError",
    "Entity",
    "EntityId",
    "ErrorKind",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    "ValueObject",
    "utc_now",
]
