from __future__ import annotations

from fastapi import APIRouter

from content_hoarder.api.invoke_api import router as invoke_router
from content_hoarder.api.meta_api import router as meta_router

router = APIRouter()

# Include sub-routers
router.include_router(meta_router, tags=["meta"])
router.include_router(invoke_router, tags=["actions"])
