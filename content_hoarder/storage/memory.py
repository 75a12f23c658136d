from __future__ import annotations

import copy
import json
import logging
import os
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from content_hoarder.storage.base import ConfigContext, StorageProxy

logger = logging.getLogger(__name__)


class InMemoryStorage(StorageProxy):
    """Process-local storage. Values are deep-copied in and out."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, tuple[Any, float | None]] = {}
        for key, value in (initial or {}).items():
            self._data[key] = (copy.deepcopy(value), None)

    def _expired(self, key: str) -> bool:
        entry = self._data.get(key)
        if entry is None:
            return False
        expires_at = entry[1]
        if expires_at is not None and expires_at <= time.time():
            del self._data[key]
            return True
        return False

    async def get(self, key: str) -> Any | None:
        if key not in self._data or self._expired(key):
            return None
        return copy.deepcopy(self._data[key][0])

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        expires_at = time.time() + ttl if ttl else None
        self._data[key] = (copy.deepcopy(value), expires_at)
        self._persist()

    async def delete(self, key: str) -> bool:
        if key not in self._data or self._expired(key):
            return False
        del self._data[key]
        self._persist()
        return True

    async def list(self, prefix: str | None = None) -> list[str]:
        keys = [key for key in list(self._data) if not self._expired(key)]
        if prefix:
            return [key for key in keys if key.startswith(prefix)]
        return keys

    def _persist(self) -> None:
        """Hook for subclasses that mirror the data elsewhere."""


class JsonFileStorage(InMemoryStorage):
    """In-memory storage mirrored to a JSON file after every write."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__()
        self._path = Path(path)
        if self._path.exists():
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
            for key, entry in raw.items():
                self._data[key] = (entry["value"], entry.get("expiresAt"))
            logger.info("Loaded %d keys from %s", len(self._data), self._path)

    def _persist(self) -> None:
        payload = {
            key: {"value": value, "expiresAt": expires_at}
            for key, (value, expires_at) in self._data.items()
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp_path.replace(self._path)


class MappingConfig(ConfigContext):
    """Config handle over a plain mapping of secret names to values."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def keys(self) -> list[str]:
        return list(self._values)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> MappingConfig:
        """Load a flat JSON object of secrets, e.g. ``{"OPENAI_API_KEY": "..."}``."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Secrets file {path} must contain a JSON object")
        return cls({str(key): str(value) for key, value in raw.items()})
