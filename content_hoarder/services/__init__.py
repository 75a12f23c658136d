from content_hoarder.services.article_service import ArticleService, extract_title
from content_hoarder.services.content_service import ContentService, format_content
from content_hoarder.services.schemas import ActionResult

__all__ = [
    "ActionResult",
    "ArticleService",
    "ContentService",
    "extract_title",
    "format_content",
]
