import pytest

from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_objects.ids import CompanyId
from vagaflow.domain.recruitment.entities import Job
from vagaflow.domain.recruitment.job_status import JobStatus
from vagaflow.domain.recruitment.value_objects.job_title import JobTitle

DESCRIPTION = "Build and maintain our hiring APIs."


def make_job(company_id: CompanyId | None = None) -> Job:
    return Job.create(company_id or CompanyId.generate(), JobTitle("Backend Engineer"), DESCRIPTION)


@pytest.mark.parametrize("length", [3, 100])
def test_job_title_accepts_boundary_lengths(length: int) -> None:
    assert len(JobTitle("x" * length).value) == length


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("", "Job title cannot be empty"),
        ("x", "Job title must be at least 3 characters"),
        ("xy", "Job title must be at least 3 characters"),
        ("x" * 101, "Job title cannot exceed 100 characters"),
    ],
)
def test_job_title_rejects_invalid_lengths(raw: str, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        JobTitle(raw)


def test_job_title_is_trimmed() -> None:
    assert JobTitle("  Data Engineer ").value == "Data Engineer"


def test_new_job_is_open() -> None:
    job = make_job()

    assert job.status is JobStatus.OPEN
    assert job.is_open()


@pytest.mark.parametrize(
    ("description", "message"),
    [
        ("", "Job description cannot be empty"),
        ("too short", "Job description must be at least 10 characters"),
        ("x" * 5001, "Job description cannot exceed 5000 characters"),
    ],
)
def test_job_rejects_invalid_description(description: str, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        Job.create(CompanyId.generate(), JobTitle("Backend Engineer"), description)


def test_close_and_reopen() -> None:
    """Test the OPEN/CLOSED toggle returns new snapshots."""
    job = make_job()

    closed = job.close()
    reopened = closed.reopen()

    assert closed.is_closed()
    assert job.is_open()
    assert reopened.is_open()
    assert reopened == job


def test_close_closed_job_fails() -> None:
    with pytest.raises(ValidationError, match="Job is already closed"):
        make_job().close().close()


def test_reopen_open_job_fails() -> None:
    with pytest.raises(ValidationError, match="Job is already open"):
        make_job().reopen()


def test_belongs_to_company() -> None:
    company_id = CompanyId.generate()
    job = make_job(company_id)

    assert job.belongs_to_company(company_id)
    assert not job.belongs_to_company(CompanyId.generate())
