from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from content_hoarder.core.lifespan import lifespan
from content_hoarder.trik import ContentHoarderTrik


@pytest.mark.asyncio
async def test_lifespan_builds_dispatcher_when_none_injected() -> None:
    """Test that lifespan wires a dispatcher around the shared HTTP client."""
    app = FastAPI()
    app.state.trik = None

    async with lifespan(app):
        assert isinstance(app.state.trik, ContentHoarderTrik)

    assert app.state.trik is None


@pytest.mark.asyncio
async def test_lifespan_keeps_injected_dispatcher() -> None:
    """Test that an injected dispatcher is left in place."""
    app = FastAPI()
    injected = ContentHoarderTrik()
    app.state.trik = injected

    async with lifespan(app):
        assert app.state.trik is injected

    assert app.state.trik is injected


@pytest.mark.asyncio
async def test_lifespan_closes_http_client_on_shutdown() -> None:
    """Test that lifespan closes the shared HTTP client."""
    with patch("content_hoarder.core.lifespan.httpx.AsyncClient") as mock_client_class:
        mock_client = mock_client_class.return_value
        mock_client.aclose = AsyncMock()
        app = FastAPI()

        async with lifespan(app):
            pass

        mock_client.aclose.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_closes_http_client_even_if_app_fails() -> None:
    """Test that the HTTP client is closed even if the app raises while running."""
    with patch("content_hoarder.core.lifespan.httpx.AsyncClient") as mock_client_class:
        mock_client = mock_client_class.return_value
        mock_client.aclose = AsyncMock()
        app = FastAPI()

        with pytest.raises(RuntimeError):
            async with lifespan(app):
                raise RuntimeError("boom")

        mock_client.aclose.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_skips_http_client_for_injected_dispatcher() -> None:
    """Test that no HTTP client is opened when the dispatcher was injected."""
    with patch("content_hoarder.core.lifespan.httpx.AsyncClient") as mock_client_class:
        app = FastAPI()
        app.state.trik = ContentHoarderTrik()

        async with lifespan(app):
            pass

        mock_client_class.assert_not_called()
