"""Classification of AI-generated notes into topics and questions."""

from .detector import ContentTypeDetector
from .processor import ExtractedContentProcessor, is_meta_commentary

__all__ = ["ContentTypeDetector", "ExtractedContentProcessor", "is_meta_commentary"]
