"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.

Every error belongs to exactly one ErrorKind. The infrastructure layer
translates kinds into transport responses, so adding a kind forces the
translation to be extended.
"""

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Closed set of domain error categories."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Invalid email format, job title too short, illegal status transition.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class UnauthorizedError(DomainError):
    """
    Raised when the caller is not allowed to perform an operation.

    Example: A company accepting an application for another company's job.
    """

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "You are not authorized to perform this action") -> None:
        super().__init__(message)


class NotFoundError(DomainError):
    """
    Raised when a referenced resource does not exist.

    Example: Looking up a job by an ID that doesn't exist.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self, resource: str, resource_id: object = None, message: str | None = None
    ) -> None:
        if message is None and resource_id is not None:
            message = f"{resource} with identifier '{resource_id}' not found"
        elif message is None:
            message = f"{resource} not found"
        details: dict[str, object] = {"resource": resource}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(message, details)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(DomainError):
    """
    Raised when an operation would violate a uniqueness rule.

    Example: Registering an email that is already taken.
    """

    kind = ErrorKind.CONFLICT
