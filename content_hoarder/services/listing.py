from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, TypeVar

from content_hoarder.services.schemas import ActionResult

T = TypeVar("T")


def empty_listing() -> ActionResult:
    return ActionResult.template("empty", totalCount=0, returnedCount=0)


def paged_listing(
    records: Sequence[T],
    *,
    sort_key: Callable[[T], datetime],
    summarize: Callable[[T], dict[str, Any]],
    limit: int,
    offset: int,
) -> ActionResult:
    """Newest first, then slice. totalCount is the pre-pagination count."""
    ordered = sorted(records, key=sort_key, reverse=True)
    page = ordered[offset : offset + limit]
    return ActionResult.template(
        "success",
        totalCount=len(ordered),
        returnedCount=len(page),
        items=[summarize(record) for record in page],
    )
