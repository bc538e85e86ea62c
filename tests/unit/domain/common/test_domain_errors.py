from vagaflow.domain.common.exceptions import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from vagaflow.domain.identity.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from vagaflow.domain.recruitment.exceptions import ApplicationAlreadyExistsError, JobClosedError


def test_each_error_carries_its_kind() -> None:
    """Test that every error family maps to exactly one kind."""
    assert ValidationError("bad").kind is ErrorKind.VALIDATION
    assert UnauthorizedError().kind is ErrorKind.UNAUTHORIZED
    assert NotFoundError("Job").kind is ErrorKind.NOT_FOUND
    assert ConflictError("dup").kind is ErrorKind.CONFLICT


def test_context_errors_inherit_kind() -> None:
    assert EmailAlreadyExistsError("a@b.com").kind is ErrorKind.CONFLICT
    assert InvalidCredentialsError().kind is ErrorKind.UNAUTHORIZED
    assert JobClosedError().kind is ErrorKind.VALIDATION
    assert ApplicationAlreadyExistsError("c", "j").kind is ErrorKind.CONFLICT


def test_not_found_message_with_and_without_identifier() -> None:
    assert NotFoundError("Job", "42").message == "Job with identifier '42' not found"
    assert NotFoundError("Job").message == "Job not found"


def test_not_found_details_expose_resource() -> None:
    error = NotFoundError("Application", "abc")

    assert error.details == {"resource": "Application", "resource_id": "abc"}


def test_unauthorized_default_message() -> None:
    assert UnauthorizedError().message == "You are not authorized to perform this action"
