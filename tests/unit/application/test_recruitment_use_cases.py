from datetime import timedelta

import pytest

from vagaflow.application.common.pagination import (
    MAX_PAGE,
    PaginatedResult,
    Pagination,
    validate_pagination_params,
)
from vagaflow.application.recruitment.use_cases import (
    AcceptApplicationUseCase,
    CloseJobUseCase,
    CreateApplicationUseCase,
    CreateJobUseCase,
    GetJobByIdUseCase,
    ListCompanyJobsUseCase,
    ListJobApplicationsUseCase,
    ListJobsUseCase,
    ListMyApplicationsUseCase,
    RejectApplicationUseCase,
    ReopenJobUseCase,
)
from vagaflow.domain.common.exceptions import UnauthorizedError, ValidationError
from vagaflow.domain.common.value_objects.ids import UserId
from vagaflow.domain.profiles.entities.company import Company
from vagaflow.domain.profiles.exceptions import CandidateNotFoundError, CompanyNotFoundError
from vagaflow.domain.recruitment.application_status import ApplicationStatus
from vagaflow.domain.recruitment.entities.job import Job
from vagaflow.domain.recruitment.exceptions import (
    ApplicationAlreadyExistsError,
    ApplicationNotFoundError,
    JobClosedError,
    JobNotFoundError,
)
from vagaflow.domain.recruitment.value_objects.job_title import JobTitle

UNKNOWN_ID = "3c9d3c4e-2b1a-4f7e-8d6c-5b4a39281706"


@pytest.fixture
def other_company(company_repository) -> Company:
    return company_repository.save(Company.create(UserId.generate(), "Globex"))


@pytest.fixture
def create_application(candidate_repository, job_repository, application_repository):
    return CreateApplicationUseCase(candidate_repository, job_repository, application_repository)


class TestPagination:
    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            (0, 500, Pagination(1, 100)),
            (2, 5, Pagination(2, 5)),
            (None, None, Pagination(1, 10)),
            (-3, -1, Pagination(1, 10)),
            (2.7, 5.9, Pagination(2, 5)),
            (float("nan"), float("inf"), Pagination(1, 10)),
        ],
    )
    def test_validate_pagination_params(self, page, limit, expected) -> None:
        assert validate_pagination_params(page, limit) == expected

    def test_huge_page_is_capped_so_offset_fits_sql_integer(self) -> None:
        pagination = validate_pagination_params(1e19, 100)

        assert pagination.page == MAX_PAGE
        assert pagination.offset < 2**63

    def test_page_above_cap_is_rejected_by_pagination(self) -> None:
        with pytest.raises(ValueError):
            Pagination(page=MAX_PAGE + 1)

    def test_offset(self) -> None:
        assert Pagination(3, 10).offset == 20

    def test_paginated_result_metadata(self) -> None:
        result = PaginatedResult(items=[1, 2], total=25, pagination=Pagination(2, 10))

        assert result.total_pages == 3
        assert result.has_next
        assert result.has_previous

    def test_empty_result_has_no_pages(self) -> None:
        result = PaginatedResult(items=[], total=0, pagination=Pagination(1, 10))

        assert result.total_pages == 0
        assert not result.has_next


class TestJobs:
    def test_create_job(self, company_repository, job_repository, company) -> None:
        use_case = CreateJobUseCase(company_repository, job_repository)

        job = use_case.execute(str(company.id), "Data Engineer", "Own our data pipelines.")

        assert job.is_open()
        assert job.company_id == company.id
        assert job_repository.jobs[job.id] == job

    def test_create_job_for_unknown_company(self, company_repository, job_repository) -> None:
        use_case = CreateJobUseCase(company_repository, job_repository)

        with pytest.raises(CompanyNotFoundError):
            use_case.execute(UNKNOWN_ID, "Data Engineer", "Own our data pipelines.")

    def test_create_job_validates_title_first(self, company_repository, job_repository) -> None:
        use_case = CreateJobUseCase(company_repository, job_repository)

        with pytest.raises(ValidationError, match="Job title must be at least 3 characters"):
            use_case.execute(UNKNOWN_ID, "QA", "Own our data pipelines.")

    def test_list_jobs_only_open_newest_first(self, job_repository, company) -> None:
        older = Job.create(company.id, JobTitle("Older Job"), "Posted a while ago.")
        older = job_repository.save(
            Job.create_with_id(
                older.id,
                older.company_id,
                older.title,
                older.description,
                older.status,
                older.created_at - timedelta(days=1),
                older.updated_at,
            )
        )
        newer = job_repository.save(
            Job.create(company.id, JobTitle("Newer Job"), "Posted just now.")
        )
        job_repository.save(
            Job.create(company.id, JobTitle("Closed Job"), "No longer hiring.").close()
        )

        result = ListJobsUseCase(job_repository).execute(1, 10)

        assert [j.id for j in result.items] == [newer.id, older.id]
        assert result.total == 2
        assert result.total_pages == 1

    def test_list_jobs_sanitizes_paging(self, job_repository) -> None:
        result = ListJobsUseCase(job_repository).execute(0, 500)

        assert result.page == 1
        assert result.limit == 100

    def test_get_job_by_id(self, job_repository, job) -> None:
        assert GetJobByIdUseCase(job_repository).execute(str(job.id)) == job

        with pytest.raises(JobNotFoundError):
            GetJobByIdUseCase(job_repository).execute(UNKNOWN_ID)

    def test_list_company_jobs_includes_closed(self, job_repository, company, job) -> None:
        closed = job_repository.save(
            Job.create(company.id, JobTitle("Closed Job"), "No longer hiring.").close()
        )

        jobs = ListCompanyJobsUseCase(job_repository).execute(str(company.id))

        assert {j.id for j in jobs} == {job.id, closed.id}

    def test_close_and_reopen_own_job(self, job_repository, company, job) -> None:
        closed = CloseJobUseCase(job_repository).execute(str(job.id), str(company.id))
        assert closed.is_closed()
        assert job_repository.jobs[job.id].is_closed()

        reopened = ReopenJobUseCase(job_repository).execute(str(job.id), str(company.id))
        assert reopened.is_open()

    def test_close_twice_fails(self, job_repository, company, job) -> None:
        use_case = CloseJobUseCase(job_repository)
        use_case.execute(str(job.id), str(company.id))

        with pytest.raises(ValidationError, match="Job is already closed"):
            use_case.execute(str(job.id), str(company.id))

    def test_close_other_company_job(self, job_repository, job, other_company) -> None:
        with pytest.raises(UnauthorizedError, match="You can only close your own jobs"):
            CloseJobUseCase(job_repository).execute(str(job.id), str(other_company.id))

        assert job_repository.jobs[job.id].is_open()

    def test_reopen_other_company_job(self, job_repository, job, other_company) -> None:
        with pytest.raises(UnauthorizedError, match="You can only reopen your own jobs"):
            ReopenJobUseCase(job_repository).execute(str(job.id), str(other_company.id))


class TestApplications:
    def test_apply_creates_pending_application(self, create_application, candidate, job):
        application = create_application.execute(str(candidate.id), str(job.id))

        assert application.status is ApplicationStatus.PENDING
        assert application.candidate_id == candidate.id
        assert application.job_id == job.id

    def test_apply_twice_conflicts(self, create_application, candidate, job) -> None:
        create_application.execute(str(candidate.id), str(job.id))

        with pytest.raises(ApplicationAlreadyExistsError, match="already applied"):
            create_application.execute(str(candidate.id), str(job.id))

    def test_apply_to_closed_job(self, create_application, job_repository, candidate, job):
        job_repository.update(job.close())

        with pytest.raises(JobClosedError, match="Cannot apply to a closed job"):
            create_application.execute(str(candidate.id), str(job.id))

    def test_closed_job_reported_before_duplicate(
        self, create_application, job_repository, candidate, job
    ) -> None:
        create_application.execute(str(candidate.id), str(job.id))
        job_repository.update(job.close())

        with pytest.raises(JobClosedError):
            create_application.execute(str(candidate.id), str(job.id))

    def test_apply_unknown_candidate_or_job(self, create_application, candidate, job) -> None:
        with pytest.raises(CandidateNotFoundError):
            create_application.execute(UNKNOWN_ID, str(job.id))
        with pytest.raises(JobNotFoundError):
            create_application.execute(str(candidate.id), UNKNOWN_ID)

    def test_accept_by_owning_company(
        self, create_application, application_repository, job_repository, company, candidate, job
    ) -> None:
        application = create_application.execute(str(candidate.id), str(job.id))
        use_case = AcceptApplicationUseCase(application_repository, job_repository)

        accepted = use_case.execute(str(application.id), str(company.id))

        assert accepted.status is ApplicationStatus.ACCEPTED
        assert application_repository.applications[application.id].is_accepted()

    def test_accept_by_other_company_is_unauthorized(
        self,
        create_application,
        application_repository,
        job_repository,
        candidate,
        job,
        other_company,
    ) -> None:
        application = create_application.execute(str(candidate.id), str(job.id))
        use_case = AcceptApplicationUseCase(application_repository, job_repository)

        with pytest.raises(
            UnauthorizedError, match="You can only accept applications for your own jobs"
        ):
            use_case.execute(str(application.id), str(other_company.id))

        assert application_repository.applications[application.id].is_pending()

    def test_reject_then_accept_fails(
        self, create_application, application_repository, job_repository, company, candidate, job
    ) -> None:
        application = create_application.execute(str(candidate.id), str(job.id))
        reject = RejectApplicationUseCase(application_repository, job_repository)
        accept = AcceptApplicationUseCase(application_repository, job_repository)

        rejected = reject.execute(str(application.id), str(company.id))

        assert rejected.is_rejected()
        with pytest.raises(ValidationError, match="Cannot accept application with status REJECTED"):
            accept.execute(str(application.id), str(company.id))

    def test_reject_by_other_company_is_unauthorized(
        self,
        create_application,
        application_repository,
        job_repository,
        candidate,
        job,
        other_company,
    ) -> None:
        application = create_application.execute(str(candidate.id), str(job.id))
        use_case = RejectApplicationUseCase(application_repository, job_repository)

        with pytest.raises(UnauthorizedError, match="reject applications for your own jobs"):
            use_case.execute(str(application.id), str(other_company.id))

    def test_accept_unknown_application(self, application_repository, job_repository, company):
        use_case = AcceptApplicationUseCase(application_repository, job_repository)

        with pytest.raises(ApplicationNotFoundError):
            use_case.execute(UNKNOWN_ID, str(company.id))

    def test_list_job_applications(
        self,
        create_application,
        application_repository,
        job_repository,
        company,
        candidate,
        job,
        other_company,
    ) -> None:
        application = create_application.execute(str(candidate.id), str(job.id))
        use_case = ListJobApplicationsUseCase(job_repository, application_repository)

        assert use_case.execute(str(job.id), str(company.id)) == [application]
        with pytest.raises(UnauthorizedError, match="view applications for your own jobs"):
            use_case.execute(str(job.id), str(other_company.id))

    def test_list_my_applications(
        self, create_application, application_repository, candidate, job
    ) -> None:
        application = create_application.execute(str(candidate.id), str(job.id))

        mine = ListMyApplicationsUseCase(application_repository).execute(str(candidate.id))

        assert mine == [application]
        assert ListMyApplicationsUseCase(application_repository).execute(UNKNOWN_ID) == []
