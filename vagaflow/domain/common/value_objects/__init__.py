"""Common value objects shared across all domain modules."""

from .ids import ApplicationId, CandidateId, CompanyId, JobId, UserId

__all__ = [
    "ApplicationId",
    "CandidateId",
    "CompanyId",
    "JobId",
    "UserId",
]
