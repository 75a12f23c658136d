from content_hoarder.models.article import Article
from content_hoarder.models.base import Record, generate_id
from content_hoarder.models.content_piece import ContentPiece, InspirationType

__all__ = ["Article", "ContentPiece", "InspirationType", "Record", "generate_id"]
