"""Host-supplied collaborators: key/value storage and config lookup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class StorageProxy(ABC):
    """Async key/value store provided by the host for one plugin."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the stored value, or None when the key is absent."""
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a JSON-compatible value under key."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove key. Returns True only if something was removed."""
        raise NotImplementedError

    @abstractmethod
    async def list(self, prefix: str | None = None) -> list[str]:
        """List stored keys, optionally restricted to a prefix."""
        raise NotImplementedError

    async def get_many(self, keys: list[str]) -> dict[str, Any | None]:
        """Batched get. Missing keys map to None."""
        return {key: await self.get(key) for key in keys}

    async def set_many(self, entries: Mapping[str, Any]) -> None:
        """Batched set."""
        for key, value in entries.items():
            await self.set(key, value)


class ConfigContext(ABC):
    """Read-only secrets/config lookup provided by the host."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    @abstractmethod
    def keys(self) -> list[str]:
        raise NotImplementedError
