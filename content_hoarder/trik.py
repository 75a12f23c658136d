"""Action dispatcher: the plugin's single entry point.

Every failure is turned into an envelope here; nothing raised by a handler
reaches the host.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import ValidationError

from content_hoarder.extraction import ContentExtractor
from content_hoarder.llm.client import LLMClient, OpenAIClient
from content_hoarder.services.article_service import ArticleService
from content_hoarder.services.content_service import (
    ContentService,
    content_not_found,
    inspiration_failed,
)
from content_hoarder.services.schemas import (
    ActionResult,
    AddInspirationInput,
    CreateArticleInput,
    DeleteContentInput,
    GetContentInput,
    ListArticlesInput,
    ListContentInput,
    UpdateArticleInput,
)
from content_hoarder.storage import (
    ArticleRepository,
    ConfigContext,
    ContentRepository,
    StorageProxy,
)

logger = logging.getLogger(__name__)

LLMClientFactory = Callable[[ConfigContext | None], LLMClient]
Handler = Callable[["_Session", dict[str, Any]], Awaitable[ActionResult]]


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary, e.g. ``Invalid input: articleId (Field required)``."""
    problems = [
        f"{'.'.join(str(part) for part in error['loc']) or 'input'} ({error['msg']})"
        for error in exc.errors()
    ]
    return f"Invalid input: {', '.join(problems)}"


class _Session:
    """Services bound to one invocation's storage and config."""

    def __init__(
        self,
        storage: StorageProxy,
        config: ConfigContext | None,
        extractor: ContentExtractor,
        llm_client_factory: LLMClientFactory,
    ) -> None:
        contents = ContentRepository(storage)
        self.content_service = ContentService(contents, extractor)
        self.article_service = ArticleService(
            ArticleRepository(storage),
            contents,
            lambda: llm_client_factory(config),
        )


async def _add_inspiration(session: _Session, data: dict[str, Any]) -> ActionResult:
    try:
        payload = AddInspirationInput.model_validate(data)
    except ValidationError as exc:
        logger.warning("Rejected addInspiration input: %s", describe_validation_error(exc))
        return inspiration_failed()
    return await session.content_service.add_inspiration(payload)


async def _list_content(session: _Session, data: dict[str, Any]) -> ActionResult:
    return await session.content_service.list_content(ListContentInput.model_validate(data))


async def _get_content(session: _Session, data: dict[str, Any]) -> ActionResult:
    try:
        payload = GetContentInput.model_validate(data)
    except ValidationError as exc:
        logger.warning("Rejected getContent input: %s", describe_validation_error(exc))
        return content_not_found()
    return await session.content_service.get_content(payload)


async def _create_article(session: _Session, data: dict[str, Any]) -> ActionResult:
    return await session.article_service.create_article(CreateArticleInput.model_validate(data))


async def _list_articles(session: _Session, data: dict[str, Any]) -> ActionResult:
    return await session.article_service.list_articles(ListArticlesInput.model_validate(data))


async def _update_article(session: _Session, data: dict[str, Any]) -> ActionResult:
    return await session.article_service.update_article(UpdateArticleInput.model_validate(data))


async def _delete_content(session: _Session, data: dict[str, Any]) -> ActionResult:
    return await session.content_service.delete_content(DeleteContentInput.model_validate(data))


ACTIONS: dict[str, Handler] = {
    "addInspiration": _add_inspiration,
    "listContent": _list_content,
    "getContent": _get_content,
    "createArticle": _create_article,
    "listArticles": _list_articles,
    "updateArticle": _update_article,
    "deleteContent": _delete_content,
}


class ContentHoarderTrik:
    """Collect content from URLs and feeds, then create articles in your voice."""

    def __init__(
        self,
        extractor: ContentExtractor | None = None,
        llm_client_factory: LLMClientFactory = OpenAIClient.from_config,
    ) -> None:
        self._extractor = extractor or ContentExtractor()
        self._llm_client_factory = llm_client_factory

    async def invoke(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """Run one action.

        ``request`` holds ``action``, ``input``, ``storage`` and optionally
        ``config``. Returns ``{responseMode, agentData?, userContent?}``.
        """
        action = request.get("action")
        storage: StorageProxy | None = request.get("storage")
        config: ConfigContext | None = request.get("config")

        if storage is None:
            return ActionResult.error("Storage not provided").to_envelope()

        handler = ACTIONS.get(action) if isinstance(action, str) else None
        if handler is None:
            return ActionResult.error(f"Unknown action: {action}").to_envelope()

        session = _Session(storage, config, self._extractor, self._llm_client_factory)
        try:
            result = await handler(session, dict(request.get("input") or {}))
        except ValidationError as exc:
            message = describe_validation_error(exc)
            logger.warning("Action %s rejected: %s", action, message)
            return ActionResult.error(message).to_envelope()
        except Exception as exc:
            logger.exception("Action %s failed", action)
            return ActionResult.error(str(exc) or "Unknown error").to_envelope()
        return result.to_envelope()
