"""Integration tests for the invoke API endpoint."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import FakeLLMClient


def _invoke(api_client: TestClient, action: str, **payload: object) -> dict:
    response = api_client.post("/api/invoke", json={"action": action, "input": payload})
    assert response.status_code == status.HTTP_200_OK
    return response.json()


def test_add_then_list_content(api_client: TestClient) -> None:
    """Test that content saved through the gateway can be listed back."""
    # Act
    added = _invoke(api_client, "addInspiration", url="https://example.com/post", tags=["ai"])
    listed = _invoke(api_client, "listContent")

    # Assert
    assert added == {
        "responseMode": "template",
        "agentData": {"template": "success", "type": "single", "contentCount": 1},
    }
    assert listed["agentData"]["totalCount"] == 1
    [item] = listed["agentData"]["items"]
    assert item["title"] == "Open Graph Title"
    assert item["tags"] == ["ai"]
    assert "content" not in item


def test_create_article_passthrough(api_client: TestClient, fake_llm: FakeLLMClient) -> None:
    """Test that article creation returns user content with metadata."""
    # Arrange
    _invoke(api_client, "addInspiration", url="https://example.com/post")
    [item] = _invoke(api_client, "listContent")["agentData"]["items"]

    # Act
    created = _invoke(
        api_client, "createArticle", contentIds=[item["id"]], instructions="Keep it short"
    )

    # Assert
    assert created["responseMode"] == "passthrough"
    assert "agentData" not in created
    user_content = created["userContent"]
    assert user_content["contentType"] == "article"
    assert user_content["metadata"]["title"] == "Generated Title"
    assert user_content["content"].startswith("# Generated Title\n\n")
    assert "Keep it short" in fake_llm.write_prompts[0]


def test_unknown_action_is_reported_in_envelope(api_client: TestClient) -> None:
    """Test that action failures are not HTTP errors."""
    result = _invoke(api_client, "explode")

    assert result == {
        "responseMode": "template",
        "agentData": {"template": "error", "message": "Unknown action: explode"},
    }


def test_missing_action_returns_validation_error(api_client: TestClient) -> None:
    """Test that a malformed request body is rejected with the error payload."""
    # Act
    response = api_client.post("/api/invoke", json={"input": {}})

    # Assert
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "validation_error"
    assert body["message"] == "Request validation failed"
    assert body["details"][0]["loc"] == ["body", "action"]
