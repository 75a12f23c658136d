from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from content_hoarder.api.dependencies import get_config, get_storage, get_trik
from content_hoarder.api.schemas import InvokeRequest, InvokeResponse
from content_hoarder.core.errors import ErrorResponse
from content_hoarder.storage import ConfigContext, StorageProxy
from content_hoarder.trik import ContentHoarderTrik

router = APIRouter()


@router.post(
    "/invoke",
    summary="Run a plugin action",
    description=(
        "Run one action against the gateway's storage. Action failures are reported "
        "inside the envelope (template 'error'), not as HTTP errors."
    ),
    response_model=InvokeResponse,
    response_model_exclude_none=True,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Invalid request body",
            "content": {
                "application/json": {
                    "examples": {
                        "validation_error": {
                            "summary": "Request validation failed",
                            "value": {
                                "error": "validation_error",
                                "message": "Request validation failed",
                                "details": [
                                    {
                                        "loc": ["body", "action"],
                                        "msg": "Field required",
                                        "type": "missing",
                                    }
                                ],
                            },
                        }
                    }
                }
            },
        },
    },
)
async def invoke(
    request_data: InvokeRequest,
    trik: ContentHoarderTrik = Depends(get_trik),
    storage: StorageProxy = Depends(get_storage),
    config: ConfigContext | None = Depends(get_config),
) -> dict[str, Any]:
    """Forward the call to the dispatcher with the gateway's storage and config."""
    return await trik.invoke(
        {
            "action": request_data.action,
            "input": request_data.input,
            "storage": storage,
            "config": config,
        }
    )
