"""Meta API endpoints (e.g. health)."""

from __future__ import annotations

from fastapi import APIRouter

from content_hoarder.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", summary="Health check", response_model=HealthResponse)
def health() -> HealthResponse:
    """Check the health of the application."""
    return HealthResponse(status="ok")
