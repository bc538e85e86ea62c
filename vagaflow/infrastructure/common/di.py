"""Bridge between FastAPI's request-scoped session and the DI container."""

import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from vagaflow.core import container
from vagaflow.database import DatabaseSession

T = TypeVar("T")

# The db override is container-wide state shared by every worker thread
_override_lock = threading.Lock()


def resolve_with_session(provider: Provider[T], db: Session) -> T:
    """Build a provider's object with `db` bound as the container's session."""
    with _override_lock, container.db.override(db):
        return provider()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    Each request gets a use case wired to that request's session.

    Example:
        use_case: CloseJobUseCase = Depends(inject_use_case(container.close_job_use_case))
    """

    def dependency(db: DatabaseSession) -> T:
        return resolve_with_session(provider, db)

    return dependency
