"""Application statuses and the legal transitions between them."""

from enum import StrEnum


class ApplicationStatus(StrEnum):
    """Lifecycle state of an application. ACCEPTED and REJECTED are terminal."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


ALLOWED_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED}),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


def can_transition_status(current: ApplicationStatus, target: ApplicationStatus) -> bool:
    """Check whether an application may move from current to target."""
    return target in ALLOWED_TRANSITIONS[current]
