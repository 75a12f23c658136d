from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from typing import Any, Literal

import feedparser
import httpx
from bs4 import BeautifulSoup

from content_hoarder.core.config import settings

logger = logging.getLogger(__name__)

UrlType = Literal["single", "feed"]

# Tried in order; the first match supplies the page body.
CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    "main",
    ".post-content",
    ".entry-content",
    ".article-body",
    "#content",
)
_NOISE_TAGS = ["script", "style", "noscript", "template"]
_WHITESPACE_PATTERN = re.compile(r"\s+")

UNTITLED = "Untitled"


class ExtractionError(Exception):
    """Raised when a page or feed cannot be fetched or read."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


@dataclass(frozen=True)
class PageContent:
    title: str
    content: str


@dataclass(frozen=True)
class FeedItem:
    title: str
    content: str
    link: str


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def _html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    return collapse_whitespace(soup.get_text(" "))


class ContentExtractor:
    """Fetches URLs and turns them into feed items or a single page's text.

    Pass an ``httpx.AsyncClient`` to share connections (and to stub the
    network in tests); otherwise a short-lived client is opened per fetch.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def _fetch(self, url: str) -> httpx.Response:
        headers = {"User-Agent": settings.fetch_user_agent}
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=headers, follow_redirects=True)
            else:
                async with httpx.AsyncClient(
                    timeout=settings.fetch_timeout_seconds, follow_redirects=True
                ) as client:
                    response = await client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise ExtractionError(f"Request timed out fetching {url}", url) from exc
        except httpx.HTTPStatusError as exc:
            raise ExtractionError(
                f"Fetching {url} returned HTTP {exc.response.status_code}", url
            ) from exc
        except httpx.HTTPError as exc:
            raise ExtractionError(f"Failed to fetch {url}: {exc}", url) from exc
        return response

    async def _parse_feed(self, url: str) -> Any:
        response = await self._fetch(url)
        parsed = feedparser.parse(io.BytesIO(response.content))
        # feedparser never raises; a document it cannot identify has no version.
        if not parsed.get("version"):
            raise ExtractionError(f"{url} is not an RSS or Atom feed", url)
        return parsed

    async def classify_url(self, url: str) -> UrlType:
        """Return "feed" if the URL parses as a feed, otherwise "single".

        Fetch failures also classify as "single"; the page fetch that follows
        reports the real error.
        """
        try:
            await self._parse_feed(url)
        except Exception as exc:
            logger.debug("Treating %s as a single page: %s", url, exc)
            return "single"
        return "feed"

    async def extract_single(self, url: str) -> PageContent:
        response = await self._fetch(url)
        soup = BeautifulSoup(response.text, "html.parser")

        title = ""
        og_title = soup.select_one('meta[property="og:title"]')
        if og_title is not None:
            title = str(og_title.get("content") or "").strip()
        if not title and soup.title is not None:
            title = soup.title.get_text().strip()

        for tag in soup.find_all(_NOISE_TAGS):
            tag.decompose()

        content = ""
        for selector in CONTENT_SELECTORS:
            element = soup.select_one(selector)
            if element is not None:
                content = element.get_text(" ").strip()
                break

        if not content and soup.body is not None:
            content = soup.body.get_text(" ")

        return PageContent(title=title or UNTITLED, content=collapse_whitespace(content))

    async def extract_feed(self, url: str) -> list[FeedItem]:
        parsed = await self._parse_feed(url)
        items: list[FeedItem] = []
        for entry in parsed.entries:
            summary = entry.get("summary") or ""
            full_content = ""
            if entry.get("content"):
                full_content = entry.content[0].get("value") or ""
            snippet = _html_to_text(full_content or summary)
            items.append(
                FeedItem(
                    title=entry.get("title") or UNTITLED,
                    content=snippet or full_content or summary or "",
                    link=entry.get("link") or url,
                )
            )
        logger.info("Parsed %d entries from feed %s", len(items), url)
        return items
