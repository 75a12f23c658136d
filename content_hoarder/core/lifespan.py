from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from content_hoarder.core.config import settings
from content_hoarder.extraction import ContentExtractor
from content_hoarder.trik import ContentHoarderTrik

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI lifespan: builds the dispatcher around one shared HTTP client unless one was injected."""
    owns_trik = getattr(app.state, "trik", None) is None
    http_client: httpx.AsyncClient | None = None
    try:
        # Startup
        if owns_trik:
            http_client = httpx.AsyncClient(timeout=settings.fetch_timeout_seconds)
            app.state.trik = ContentHoarderTrik(extractor=ContentExtractor(client=http_client))
        logger.info("%s gateway started (environment=%s)", settings.app_name, settings.environment)
        yield

        # Shutdown
    finally:
        if owns_trik:
            app.state.trik = None
        if http_client is not None:
            await http_client.aclose()
