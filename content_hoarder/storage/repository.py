"""Keyed records plus a per-collection id index, over a StorageProxy.

Writes are two steps (record, then index) and are not atomic. A record
written without its index entry is invisible to ``list_all``; an index entry
whose record is gone is skipped on read.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from pydantic import ValidationError

from content_hoarder.models import Article, ContentPiece, Record
from content_hoarder.storage.base import StorageProxy

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class IndexedRepository(Generic[RecordT]):
    """Records stored under ``{collection}:{id}``, enumerated via ``{collection}:index``."""

    def __init__(self, storage: StorageProxy, collection: str, model: type[RecordT]) -> None:
        self._storage = storage
        self._collection = collection
        self._model = model

    @property
    def index_key(self) -> str:
        return f"{self._collection}:index"

    def record_key(self, record_id: str) -> str:
        return f"{self._collection}:{record_id}"

    async def ids(self) -> list[str]:
        index = await self._storage.get(self.index_key)
        return list(index) if index else []

    async def _set_index(self, index: list[str]) -> None:
        await self._storage.set(self.index_key, index)

    async def get(self, record_id: str) -> RecordT | None:
        """Direct lookup. None means not found."""
        raw = await self._storage.get(self.record_key(record_id))
        if raw is None:
            return None
        try:
            return self._model.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring malformed %s record %s", self._collection, record_id)
            return None

    async def put(self, record: RecordT) -> None:
        await self._storage.set(self.record_key(record.id), record.to_storage())
        index = await self.ids()
        if record.id not in index:
            await self._set_index([*index, record.id])

    async def delete(self, record_id: str) -> bool:
        deleted = await self._storage.delete(self.record_key(record_id))
        if deleted:
            index = await self.ids()
            await self._set_index([i for i in index if i != record_id])
        return deleted

    async def get_existing(self, record_ids: list[str]) -> list[RecordT]:
        """Resolve ids in order, silently skipping missing ones."""
        records: list[RecordT] = []
        for record_id in record_ids:
            record = await self.get(record_id)
            if record is not None:
                records.append(record)
        return records

    async def list_all(self) -> list[RecordT]:
        return await self.get_existing(await self.ids())


class ContentRepository(IndexedRepository[ContentPiece]):
    def __init__(self, storage: StorageProxy) -> None:
        super().__init__(storage, "content", ContentPiece)


class ArticleRepository(IndexedRepository[Article]):
    def __init__(self, storage: StorageProxy) -> None:
        super().__init__(storage, "article", Article)
