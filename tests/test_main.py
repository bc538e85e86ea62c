"""Tests for application wiring: health, API root and the OpenAPI surface."""

from fastapi import status
from fastapi.testclient import TestClient

from vagaflow.config import get_settings

settings = get_settings()


class TestServiceEndpoints:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "healthy"}

    def test_api_root_describes_this_deployment(self, client: TestClient) -> None:
        response = client.get(f"{settings.API_V1_PREFIX}/")

        assert response.json() == {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    def test_advertised_docs_url_is_served(self, client: TestClient) -> None:
        docs_url = client.get(f"{settings.API_V1_PREFIX}/").json()["docs"]

        response = client.get(docs_url)

        assert response.status_code == status.HTTP_200_OK
        assert "text/html" in response.headers["content-type"]

    def test_unknown_route_is_404(self, client: TestClient) -> None:
        response = client.get(f"{settings.API_V1_PREFIX}/nothing-here")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestOpenApi:
    def test_schema_carries_project_metadata(self, client: TestClient) -> None:
        response = client.get(f"{settings.API_V1_PREFIX}/openapi.json")

        info = response.json()["info"]
        assert info["title"] == "VagaFlow API"
        assert info["version"] == settings.VERSION

    def test_schema_lists_recruitment_routes(self, client: TestClient) -> None:
        paths = client.get(f"{settings.API_V1_PREFIX}/openapi.json").json()["paths"]

        assert {
            "/api/v1/auth/register",
            "/api/v1/auth/login",
            "/api/v1/jobs",
            "/api/v1/jobs/{job_id}/close",
            "/api/v1/applications",
            "/api/v1/applications/{application_id}/accept",
            "/api/v1/companies/me/jobs",
        } <= set(paths)
