from content_hoarder.storage.base import ConfigContext, StorageProxy
from content_hoarder.storage.memory import InMemoryStorage, JsonFileStorage, MappingConfig
from content_hoarder.storage.repository import (
    ArticleRepository,
    ContentRepository,
    IndexedRepository,
)

__all__ = [
    "ConfigContext",
    "StorageProxy",
    "InMemoryStorage",
    "JsonFileStorage",
    "MappingConfig",
    "IndexedRepository",
    "ContentRepository",
    "ArticleRepository",
]
