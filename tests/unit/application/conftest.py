"""In-memory stand-ins for the repositories and services used by the use cases."""

import pytest

from vagaflow.application.common.pagination import Pagination
from vagaflow.application.identity.protocols.token_service import AccessToken
from vagaflow.domain.common.value_objects.ids import (
    ApplicationId,
    CandidateId,
    CompanyId,
    JobId,
    UserId,
)
from vagaflow.domain.identity.entities.user import User
from vagaflow.domain.identity.exceptions import EmailAlreadyExistsError
from vagaflow.domain.identity.user_role import UserRole
from vagaflow.domain.identity.value_objects.email import Email
from vagaflow.domain.identity.value_objects.password_hash import PasswordHash
from vagaflow.domain.profiles.entities.candidate import Candidate
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.domain.recruitment.application_status import ApplicationStatus
from vagaflow.domain.recruitment.entities.application import Application
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.exceptions import ApplicationAlreadyExistsError
from vagaflow.domain.recruitment.job_status import JobStatus
from vagaflow.domain.recruitment.value_objects.job_title import JobTitle


class FakePasswordService:
    """Reversible "hash" that records every call."""

    DUMMY_HASH = "fake:dummy"

    def __init__(self) -> None:
        self.verified: list[tuple[str, str]] = []

    def hash_password(self, plain_password: str) -> str:
        return "fake:" + plain_password

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        self.verified.append((plain_password, hashed_password))
        return hashed_password == "fake:" + plain_password

    def get_dummy_hash(self) -> str:
        return self.DUMMY_HASH


class FakeTokenService:
    def __init__(self) -> None:
        self.issued: list[tuple[str, str]] = []

    def create_access_token(self, user_id: str, role: str) -> AccessToken:
        self.issued.append((user_id, role))
        return AccessToken(access_token=f"token-{user_id}", token_type="bearer", expires_in=3600)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.calls = 0

    def find_by_id(self, user_id: UserId) -> User | None:
        self.calls += 1
        return self.users.get(user_id)

    def find_by_email(self, email: Email) -> User | None:
        self.calls += 1
        return next((u for u in self.users.values() if u.email == email), None)

    def exists_by_email(self, email: Email) -> bool:
        return self.find_by_email(email) is not None

    def save(self, user: User) -> User:
        self.calls += 1
        if any(u.email == user.email for u in self.users.values()):
            raise EmailAlreadyExistsError(str(user.email))
        self.users[user.id] = user
        return user

    def update(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def delete(self, user_id: UserId) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryCandidateRepository:
    def __init__(self) -> None:
        self.candidates: dict[CandidateId, Candidate] = {}

    def find_by_id(self, candidate_id: CandidateId) -> Candidate | None:
        return self.candidates.get(candidate_id)

    def find_by_user_id(self, user_id: UserId) -> Candidate | None:
        return next((c for c in self.candidates.values() if c.user_id == user_id), None)

    def exists_by_user_id(self, user_id: UserId) -> bool:
        return self.find_by_user_id(user_id) is not None

    def save(self, candidate: Candidate) -> Candidate:
        self.candidates[candidate.id] = candidate
        return candidate

    def update(self, candidate: Candidate) -> Candidate:
        self.candidates[candidate.id] = candidate
        return candidate

    def delete(self, candidate_id: CandidateId) -> bool:
        return self.candidates.pop(candidate_id, None) is not None


class InMemoryCompanyRepository:
    def __init__(self) -> None:
        self.companies: dict[CompanyId, Company] = {}

    def find_by_id(self, company_id: CompanyId) -> Company | None:
        return self.companies.get(company_id)

    def find_by_user_id(self, user_id: UserId) -> Company | None:
        return next((c for c in self.companies.values() if c.user_id == user_id), None)

    def exists_by_user_id(self, user_id: UserId) -> bool:
        return self.find_by_user_id(user_id) is not None

    def save(self, company: Company) -> Company:
        self.companies[company.id] = company
        return company

    def update(self, company: Company) -> Company:
        self.companies[company.id] = company
        return company

    def delete(self, company_id: CompanyId) -> bool:
        return self.companies.pop(company_id, None) is not None


class InMemoryJobRepository:
    def __init__(self) -> None:
        self.jobs: dict[JobId, Job] = {}

    def find_by_id(self, job_id: JobId) -> Job | None:
        return self.jobs.get(job_id)

    def find_by_company_id(self, company_id: CompanyId) -> list[Job]:
        return [j for j in self.jobs.values() if j.company_id == company_id]

    def find_by_status(self, status: JobStatus) -> list[Job]:
        return [j for j in self.jobs.values() if j.status == status]

    def find_all_open(self) -> list[Job]:
        return sorted(
            self.find_by_status(JobStatus.OPEN), key=lambda j: j.created_at, reverse=True
        )

    def find_all_open_paginated(self, pagination: Pagination) -> tuple[list[Job], int]:
        open_jobs = self.find_all_open()
        page = open_jobs[pagination.offset : pagination.offset + pagination.limit]
        return page, len(open_jobs)

    def count_open(self) -> int:
        return len(self.find_by_status(JobStatus.OPEN))

    def save(self, job: Job) -> Job:
        self.jobs[job.id] = job
        return job

    def update(self, job: Job) -> Job:
        self.jobs[job.id] = job
        return job

    def delete(self, job_id: JobId) -> bool:
        return self.jobs.pop(job_id, None) is not None


class InMemoryApplicationRepository:
    def __init__(self, job_repository: InMemoryJobRepository) -> None:
        self.applications: dict[ApplicationId, Application] = {}
        self.job_repository = job_repository

    def find_by_id(self, application_id: ApplicationId) -> Application | None:
        return self.applications.get(application_id)

    def find_by_candidate_id(self, candidate_id: CandidateId) -> list[Application]:
        return [a for a in self.applications.values() if a.candidate_id == candidate_id]

    def find_by_job_id(self, job_id: JobId) -> list[Application]:
        return [a for a in self.applications.values() if a.job_id == job_id]

    def find_by_company_id(self, company_id: CompanyId) -> list[Application]:
        job_ids = {j.id for j in self.job_repository.find_by_company_id(company_id)}
        return [a for a in self.applications.values() if a.job_id in job_ids]

    def find_by_status(self, status: ApplicationStatus) -> list[Application]:
        return [a for a in self.applications.values() if a.status == status]

    def exists_by_candidate_and_job(self, candidate_id: CandidateId, job_id: JobId) -> bool:
        return any(
            a.candidate_id == candidate_id and a.job_id == job_id
            for a in self.applications.values()
        )

    def save(self, application: Application) -> Application:
        if self.exists_by_candidate_and_job(application.candidate_id, application.job_id):
            raise ApplicationAlreadyExistsError(application.candidate_id, application.job_id)
        self.applications[application.id] = application
        return application

    def update(self, application: Application) -> Application:
        self.applications[application.id] = application
        return application

    def delete(self, application_id: ApplicationId) -> bool:
        return self.applications.pop(application_id, None) is not None


@pytest.fixture
def password_service() -> FakePasswordService:
    return FakePasswordService()


@pytest.fixture
def token_service() -> FakeTokenService:
    return FakeTokenService()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def candidate_repository() -> InMemoryCandidateRepository:
    return InMemoryCandidateRepository()


@pytest.fixture
def company_repository() -> InMemoryCompanyRepository:
    return InMemoryCompanyRepository()


@pytest.fixture
def job_repository() -> InMemoryJobRepository:
    return InMemoryJobRepository()


@pytest.fixture
def application_repository(job_repository: InMemoryJobRepository) -> InMemoryApplicationRepository:
    return InMemoryApplicationRepository(job_repository)


@pytest.fixture
def stored_user(user_repository: InMemoryUserRepository):
    """Persist a user directly, bypassing the use cases."""

    def _store(email: str, role: UserRole, password: str = "secret123") -> User:
        user = User.create(
            email=Email(email),
            password_hash=PasswordHash.from_hash("fake:" + password),
            name="Stored User",
            role=role,
        )
        return user_repository.save(user)

    return _store


@pytest.fixture
def company(company_repository: InMemoryCompanyRepository) -> Company:
    return company_repository.save(Company.create(UserId.generate(), "Acme"))


@pytest.fixture
def candidate(candidate_repository: InMemoryCandidateRepository) -> Candidate:
    return candidate_repository.save(Candidate.create(UserId.generate(), "Python developer"))


@pytest.fixture
def job(job_repository: InMemoryJobRepository, company: Company) -> Job:
    return job_repository.save(
        Job.create(company.id, JobTitle("Backend Engineer"), "Build and run our Python APIs.")
    )
