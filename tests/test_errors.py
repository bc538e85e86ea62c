"""Tests for the error body returned when a request fails unexpectedly."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from vagaflow.application.recruitment.use_cases.create_job_use_case import CreateJobUseCase
from vagaflow.application.recruitment.use_cases.get_job_by_id_use_case import GetJobByIdUseCase
from vagaflow.main import app

AuthHeaders = dict[str, str]

UNEXPECTED_BODY = {
    "error": "Internal Server Error",
    "message": "An unexpected error occurred. Please try again later.",
}


def _explode(*args: object, **kwargs: object) -> None:
    raise RuntimeError("database went away")


@pytest.fixture
def lenient_client(client: TestClient) -> TestClient:
    """A client that returns 500 responses instead of re-raising server errors."""
    return TestClient(app, raise_server_exceptions=False)


class TestUnexpectedErrors:
    def test_mutation_failure_uses_error_body(
        self,
        lenient_client: TestClient,
        company_headers: AuthHeaders,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(CreateJobUseCase, "execute", _explode)

        response = lenient_client.post(
            "/api/v1/jobs",
            json={"title": "Backend Engineer", "description": "Build and run our Python APIs."},
            headers=company_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == UNEXPECTED_BODY

    def test_read_failure_uses_same_error_body(
        self, lenient_client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(GetJobByIdUseCase, "execute", _explode)

        response = lenient_client.get("/api/v1/jobs/7a0e6c1d-1c1b-4a7b-b0e4-52a3c9f01234")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == UNEXPECTED_BODY
        assert "detail" not in response.json()
