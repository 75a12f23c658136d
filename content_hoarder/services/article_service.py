"""Article service - synthesizing, listing and revising articles via the LLM."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from content_hoarder.llm.client import LLMClient
from content_hoarder.llm.prompts import get_article_prompt, get_revision_prompt
from content_hoarder.models import Article, ContentPiece
from content_hoarder.models.base import utcnow
from content_hoarder.services.listing import empty_listing, paged_listing
from content_hoarder.services.schemas import (
    ActionResult,
    CreateArticleInput,
    ListArticlesInput,
    UpdateArticleInput,
)
from content_hoarder.storage import ArticleRepository, ContentRepository

logger = logging.getLogger(__name__)

UNTITLED_ARTICLE = "Untitled Article"
_HEADING_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)

LLMClientProvider = Callable[[], LLMClient]


def extract_title(generated: str, requested: str | None = None) -> str:
    """Requested title, else the first markdown H1 in the output, else a placeholder."""
    if requested:
        return requested
    match = _HEADING_PATTERN.search(generated)
    if match:
        return match.group(1)
    return UNTITLED_ARTICLE


def _summarize(article: Article) -> dict[str, Any]:
    return article.model_dump(
        mode="json",
        by_alias=True,
        include={"id", "title", "version", "created_at", "updated_at"},
    )


def _source_blocks(pieces: list[ContentPiece]) -> list[str]:
    return [piece.source_block() for piece in pieces]


class ArticleService:
    """Creates articles from stored content and revises them.

    The LLM client is requested only once a prompt is ready, so requests that
    fail validation never need a credential.
    """

    def __init__(
        self,
        articles: ArticleRepository,
        contents: ContentRepository,
        llm_client_provider: LLMClientProvider,
    ) -> None:
        self._articles = articles
        self._contents = contents
        self._llm_client_provider = llm_client_provider

    async def create_article(self, data: CreateArticleInput) -> ActionResult:
        pieces = await self._contents.get_existing(data.content_ids)
        if not pieces:
            return ActionResult.passthrough("error", "No valid content pieces found")

        prompt = get_article_prompt(_source_blocks(pieces), data.instructions, data.title)
        generated = await self._llm_client_provider().write_article(prompt)
        title = extract_title(generated, data.title)

        article = Article(
            title=title,
            content=generated,
            source_content_ids=list(data.content_ids),
            instructions=data.instructions,
        )
        await self._articles.put(article)
        logger.info("Created article %s from %d source(s)", article.id, len(pieces))

        return ActionResult.passthrough(
            "article",
            f"# {title}\n\n{generated}",
            metadata={"articleId": article.id, "title": title},
        )

    async def list_articles(self, data: ListArticlesInput) -> ActionResult:
        if not await self._articles.ids():
            return empty_listing()

        return paged_listing(
            await self._articles.list_all(),
            sort_key=lambda article: article.updated_at,
            summarize=_summarize,
            limit=data.limit,
            offset=data.offset,
        )

    async def update_article(self, data: UpdateArticleInput) -> ActionResult:
        article = await self._articles.get(data.article_id)
        if article is None:
            return ActionResult.passthrough("error", "Article not found")

        additional = await self._contents.get_existing(data.additional_content_ids)
        prompt = get_revision_prompt(article.content, data.instructions, _source_blocks(additional))
        revised = await self._llm_client_provider().revise_article(prompt)

        # An empty completion keeps the current body but still counts as a revision.
        article.content = revised or article.content
        article.version += 1
        article.updated_at = utcnow()
        article.instructions = data.instructions
        if data.additional_content_ids:
            article.source_content_ids = list(
                dict.fromkeys([*article.source_content_ids, *data.additional_content_ids])
            )

        await self._articles.put(article)
        logger.info("Revised article %s to version %d", article.id, article.version)

        return ActionResult.passthrough(
            "article",
            f"# {article.title}\n\n{article.content}",
            metadata={"articleId": article.id, "title": article.title, "version": article.version},
        )
