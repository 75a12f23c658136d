"""Integration tests for health API endpoint."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient

from content_hoarder.api.schemas import HealthResponse


def test_health(api_client: TestClient) -> None:
    """Test that the health endpoint returns ok status."""
    # Act
    response = api_client.get("/api/health")

    # Assert
    assert response.status_code == status.HTTP_200_OK
    parsed = HealthResponse.model_validate(response.json())
    assert parsed.status == "ok"


def test_unknown_route_returns_error_payload(api_client: TestClient) -> None:
    """Test that unknown routes use the standard error payload."""
    response = api_client.get("/api/missing")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "not_found", "message": "Not Found"}


def test_wrong_method_returns_error_payload(api_client: TestClient) -> None:
    """Test that a disallowed method is mapped to its error code."""
    response = api_client.post("/api/health")

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"error": "method_not_allowed", "message": "Method Not Allowed"}
