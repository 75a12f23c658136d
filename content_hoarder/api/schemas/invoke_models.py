"""Request and response models for the invoke endpoint."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class InvokeRequest(BaseModel):
    """One action call, as the host gateway would forward it."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "action": "addInspiration",
                    "input": {"url": "https://example.com", "tags": ["example"]},
                }
            ]
        }
    )

    action: str = Field(..., min_length=1, description="Action to run, e.g. listContent")
    input: dict[str, Any] = Field(default_factory=dict, description="Action input payload")


class InvokeResponse(BaseModel):
    """Result envelope returned by every action."""

    responseMode: Literal["template", "passthrough"]
    agentData: dict[str, Any] | None = None
    userContent: dict[str, Any] | None = None
