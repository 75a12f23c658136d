"""Local gateway: hosts the plugin over HTTP for development.

Run with ``uvicorn content_hoarder.main:app``.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from content_hoarder.api.router import router as api_router
from content_hoarder.core.config import InvalidSettingsError, MissingRequiredSettingsError
from content_hoarder.core.errors import (
    http_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from content_hoarder.core.lifespan import lifespan
from content_hoarder.core.logging import configure_logging
from content_hoarder.storage import (
    ConfigContext,
    InMemoryStorage,
    JsonFileStorage,
    MappingConfig,
    StorageProxy,
)
from content_hoarder.trik import ContentHoarderTrik

# Import settings - this may raise InvalidSettingsError
try:
    from content_hoarder.core.config import settings
except MissingRequiredSettingsError as e:
    print("ERROR: Missing required environment variables:", file=sys.stderr)
    for field in e.missing_fields:
        print(f"  - {field}", file=sys.stderr)
    sys.exit(1)
except InvalidSettingsError as e:
    print("ERROR: Invalid environment variable values:", file=sys.stderr)
    for field, message in e.invalid_fields:
        print(f"  - {field}: {message}", file=sys.stderr)
    print("\nPlease update these in your .env file", file=sys.stderr)
    sys.exit(1)


def build_storage() -> StorageProxy:
    if settings.storage_path:
        return JsonFileStorage(settings.storage_path)
    return InMemoryStorage()


def build_config() -> ConfigContext | None:
    # Without a secrets file the LLM client falls back to settings/environment.
    if settings.secrets_path:
        return MappingConfig.from_file(settings.secrets_path)
    return None


def create_app(
    storage: StorageProxy | None = None,
    config: ConfigContext | None = None,
    trik: ContentHoarderTrik | None = None,
) -> FastAPI:
    configure_logging()

    try:
        api_version = version("content-hoarder")
    except PackageNotFoundError:
        api_version = "0.1.0"  # Fallback if package not installed
        logging.warning("content-hoarder package not found, using fallback version 0.1.0")

    is_debug_mode = settings.environment == "local"
    app = FastAPI(
        title=settings.app_name,
        version=api_version,
        debug=is_debug_mode,
        lifespan=lifespan,
    )
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, request_validation_exception_handler)
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
    app.include_router(api_router, prefix="/api")

    app.state.storage = storage if storage is not None else build_storage()
    app.state.config = config if config is not None else build_config()
    # None: the lifespan builds one around a shared HTTP client
    app.state.trik = trik

    return app


app = create_app()
