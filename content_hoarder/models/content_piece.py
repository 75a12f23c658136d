from __future__ import annotations

from typing import Literal

from pydantic import Field

from content_hoarder.models.base import Record, UtcDatetime, generate_id, utcnow

InspirationType = Literal["single", "feed"]


class ContentPiece(Record):
    """One unit of extracted text with provenance metadata."""

    id: str = Field(default_factory=generate_id)
    title: str
    source: str
    content: str
    summary: str | None = None
    tags: list[str] = Field(default_factory=list)
    added_at: UtcDatetime = Field(default_factory=utcnow)
    inspiration_type: InspirationType = "single"

    def source_block(self) -> str:
        """Markdown block used when feeding this piece to the model."""
        return f"## {self.title}\nSource: {self.source}\n\n{self.content}"
