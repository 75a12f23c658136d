"""Pytest configuration and shared fixtures.

Network access is replaced by ``httpx.MockTransport`` and the LLM by an
in-process fake, so no test touches the internet or spends API credits.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from content_hoarder.extraction import ContentExtractor
from content_hoarder.llm.client import LLMClient
from content_hoarder.main import create_app
from content_hoarder.storage import ConfigContext, InMemoryStorage
from content_hoarder.trik import ContentHoarderTrik

ARTICLE_HTML = """<!doctype html>
<html>
  <head>
    <title>Page Title</title>
    <meta property="og:title" content="Open Graph Title">
  </head>
  <body>
    <nav>Home | About</nav>
    <article>
      <h1>Writing   well</h1>
      <p>First paragraph.</p>
      <script>var tracking = true;</script>
      <p>Second
         paragraph.</p>
    </article>
    <footer>Footer text</footer>
  </body>
</html>
"""

RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Example Feed</title>
    <link>https://example.com/</link>
    <description>Posts</description>
    <item>
      <title>First post</title>
      <link>https://example.com/posts/1</link>
      <description>&lt;p&gt;Short &lt;b&gt;summary&lt;/b&gt; one&lt;/p&gt;</description>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/posts/2</link>
      <description>Summary two</description>
      <content:encoded><![CDATA[<p>Full   content <em>two</em></p>]]></content:encoded>
    </item>
    <item>
      <description>Untitled and unlinked</description>
    </item>
  </channel>
</rss>
"""

Route = tuple[int, str, str]


def build_transport(routes: dict[str, Route]) -> httpx.MockTransport:
    """Serve ``routes`` keyed by URL path; unknown paths get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path or "/")
        if route is None:
            return httpx.Response(404, text="Not Found")
        status_code, content_type, body = route
        return httpx.Response(status_code, headers={"content-type": content_type}, text=body)

    return httpx.MockTransport(handler)


DEFAULT_ROUTES: dict[str, Route] = {
    "/": (200, "text/html; charset=utf-8", ARTICLE_HTML),
    "/post": (200, "text/html; charset=utf-8", ARTICLE_HTML),
    "/feed.xml": (200, "application/rss+xml", RSS_FEED),
}


class FakeLLMClient(LLMClient):
    """Records prompts and returns canned completions."""

    def __init__(
        self,
        article: str = "# Generated Title\n\nGenerated body.",
        revision: str = "Revised body.",
    ) -> None:
        self.article = article
        self.revision = revision
        self.write_prompts: list[str] = []
        self.revise_prompts: list[str] = []

    async def write_article(self, prompt: str) -> str:
        self.write_prompts.append(prompt)
        return self.article

    async def revise_article(self, prompt: str) -> str:
        self.revise_prompts.append(prompt)
        return self.revision


@pytest.fixture
def routes() -> dict[str, Route]:
    """Mutable copy of the default routes; tests may add or override paths."""
    return dict(DEFAULT_ROUTES)


@pytest.fixture
def http_client(routes: dict[str, Route]) -> httpx.AsyncClient:
    # MockTransport holds no connections, so the client needs no explicit close.
    return httpx.AsyncClient(transport=build_transport(routes))


@pytest.fixture
def extractor(http_client: httpx.AsyncClient) -> ContentExtractor:
    return ContentExtractor(client=http_client)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def llm_factory(fake_llm: FakeLLMClient) -> Callable[[ConfigContext | None], LLMClient]:
    return lambda _config: fake_llm


@pytest.fixture
def trik(
    extractor: ContentExtractor,
    llm_factory: Callable[[ConfigContext | None], LLMClient],
) -> ContentHoarderTrik:
    return ContentHoarderTrik(extractor=extractor, llm_client_factory=llm_factory)


@pytest.fixture
def app(storage: InMemoryStorage, trik: ContentHoarderTrik) -> FastAPI:
    """Gateway app wired to the in-memory storage and the stubbed dispatcher."""
    return create_app(storage=storage, trik=trik)


@pytest.fixture
def api_client(app: FastAPI) -> Iterator[TestClient]:
    """Synchronous HTTP client; the context manager runs the app lifespan."""
    with TestClient(app) as client:
        yield client
