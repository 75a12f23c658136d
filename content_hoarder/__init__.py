"""Content Hoarder: collect content from URLs and feeds, then create articles in your voice."""

from content_hoarder.trik import ACTIONS, ContentHoarderTrik

trik = ContentHoarderTrik()

__all__ = ["ACTIONS", "ContentHoarderTrik", "trik"]
