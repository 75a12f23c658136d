from content_hoarder.extraction.extractor import (
    ContentExtractor,
    ExtractionError,
    FeedItem,
    PageContent,
    UrlType,
)

__all__ = ["ContentExtractor", "ExtractionError", "FeedItem", "PageContent", "UrlType"]
