from __future__ import annotations

from pydantic import Field

from content_hoarder.models.base import Record, UtcDatetime, generate_id, utcnow


class Article(Record):
    """Generated article. Revised in place; version starts at 1."""

    id: str = Field(default_factory=generate_id)
    title: str
    content: str
    source_content_ids: list[str] = Field(default_factory=list)
    instructions: str = ""
    version: int = Field(default=1, ge=1)
    created_at: UtcDatetime = Field(default_factory=utcnow)
    updated_at: UtcDatetime = Field(default_factory=utcnow)
