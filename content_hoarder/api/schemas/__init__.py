"""API request and response schemas."""

from __future__ import annotations

from content_hoarder.api.schemas.invoke_models import InvokeRequest, InvokeResponse
from content_hoarder.api.schemas.meta_response_models import HealthResponse

__all__ = ["HealthResponse", "InvokeRequest", "InvokeResponse"]
