"""Content service - collecting, listing, reading and deleting content pieces."""

from __future__ import annotations

import logging
from typing import Any

from content_hoarder.extraction import ContentExtractor, UrlType
from content_hoarder.models import ContentPiece
from content_hoarder.services.listing import empty_listing, paged_listing
from content_hoarder.services.schemas import (
    ActionResult,
    AddInspirationInput,
    DeleteContentInput,
    GetContentInput,
    ListContentInput,
)
from content_hoarder.storage import ContentRepository

logger = logging.getLogger(__name__)


_SUMMARY_FIELDS = {"id", "title", "source", "tags", "added_at"}


def _summarize(piece: ContentPiece, fields: set[str] = _SUMMARY_FIELDS) -> dict[str, Any]:
    return piece.model_dump(mode="json", by_alias=True, include=fields)


def inspiration_failed(url_type: UrlType = "single") -> ActionResult:
    return ActionResult.template("error", type=url_type, contentCount=0)


def content_not_found() -> ActionResult:
    return ActionResult.passthrough("error", "Content not found")


def format_content(piece: ContentPiece) -> str:
    """Markdown rendering of a piece: header block, rule, then the body."""
    added_at = piece.to_storage()["addedAt"]
    tags = ", ".join(piece.tags) or "none"
    return (
        f"# {piece.title}\n\n"
        f"**Source:** {piece.source}\n"
        f"**Tags:** {tags}\n"
        f"**Added:** {added_at}\n\n"
        f"---\n\n"
        f"{piece.content}"
    )


class ContentService:
    """Adds inspirations and manages the stored content pieces."""

    def __init__(self, repository: ContentRepository, extractor: ContentExtractor) -> None:
        self._repository = repository
        self._extractor = extractor

    async def add_inspiration(self, data: AddInspirationInput) -> ActionResult:
        """Store one piece for a page, or one piece per item for a feed.

        Failures produce an error result with contentCount 0. Feed items stored
        before the failure are kept.
        """
        url_type: UrlType = "single"
        try:
            url_type = await self._extractor.classify_url(data.url)

            if url_type == "feed":
                items = await self._extractor.extract_feed(data.url)
                for item in items:
                    await self._repository.put(
                        ContentPiece(
                            title=item.title,
                            source=item.link,
                            content=item.content,
                            tags=list(data.tags),
                            inspiration_type="feed",
                        )
                    )
                count = len(items)
            else:
                page = await self._extractor.extract_single(data.url)
                await self._repository.put(
                    ContentPiece(
                        title=page.title,
                        source=data.url,
                        content=page.content,
                        tags=list(data.tags),
                        inspiration_type="single",
                    )
                )
                count = 1
        except Exception:
            logger.exception("Failed to add inspiration from %s", data.url)
            return inspiration_failed(url_type)

        logger.info("Stored %d %s content piece(s) from %s", count, url_type, data.url)
        return ActionResult.template("success", type=url_type, contentCount=count)

    async def list_content(self, data: ListContentInput) -> ActionResult:
        if not await self._repository.ids():
            return empty_listing()

        pieces = await self._repository.list_all()
        if data.tags:
            wanted = set(data.tags)
            pieces = [piece for piece in pieces if wanted.intersection(piece.tags)]

        return paged_listing(
            pieces,
            sort_key=lambda piece: piece.added_at,
            summarize=_summarize,
            limit=data.limit,
            offset=data.offset,
        )

    async def get_content(self, data: GetContentInput) -> ActionResult:
        piece = await self._repository.get(data.content_id)
        if piece is None:
            return content_not_found()

        return ActionResult.passthrough(
            "content",
            format_content(piece),
            metadata=_summarize(piece, _SUMMARY_FIELDS - {"id"}),
        )

    async def delete_content(self, data: DeleteContentInput) -> ActionResult:
        # Articles citing this piece keep the id in sourceContentIds.
        if not await self._repository.delete(data.content_id):
            return ActionResult.template("notFound")
        logger.info("Deleted content piece %s", data.content_id)
        return ActionResult.template("success")
