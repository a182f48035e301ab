"""Turn raw AI response lines into typed content items."""

from typing import Dict, Iterable, List

from ..config.logging import content_logger
from ..models.content import ContentType, ExtractedContentItem
from .detector import ContentTypeDetector

# Lines where the model talks about its own answer instead of answering.
META_COMMENTARY_PHRASES = (
    "here's an analysis",
    "here is an analysis",
    "based on the",
    "analyzing the",
    "i've analyzed",
    "after analyzing",
    "classroom transcription",
    "format your response",
)


def is_meta_commentary(line: str) -> bool:
    """Case-insensitive substring match against the meta-commentary denylist."""
    lower = line.lower()
    return any(phrase in lower for phrase in META_COMMENTARY_PHRASES)


class ExtractedContentProcessor:
    """Classifies AI output into topics and questions."""

    @staticmethod
    def process_ai_response(lines: Iterable[str]) -> List[ExtractedContentItem]:
        """Build items from raw response lines.

        Empty and meta-commentary lines are dropped. Labeled lines keep the
        label's type; unlabeled lines are typed by the content heuristic.
        Output order follows input order; duplicates are kept.
        """
        items: List[ExtractedContentItem] = []
        dropped = 0

        for raw in lines:
            line = raw.strip()
            if not line or is_meta_commentary(line):
                dropped += 1
                continue

            content_type = ContentTypeDetector.detect_from_line(line)
            if content_type is not None:
                content = ContentTypeDetector.extract_content(line)
                if not content:
                    dropped += 1
                    continue
            else:
                content = line
                content_type = ContentTypeDetector.detect_from_content(line)

            items.append(ExtractedContentItem(content=content, type=content_type))

        content_logger.debug("AI response processed", items=len(items), dropped=dropped)
        return items

    @staticmethod
    def process_plain_text_list(texts: Iterable[str]) -> List[ExtractedContentItem]:
        """Type plain, unlabeled texts with the content heuristic only."""
        return [
            ExtractedContentItem(
                content=text,
                type=ContentTypeDetector.detect_from_content(text),
            )
            for text in texts
            if text.strip()
        ]

    @staticmethod
    def group_by_type(items: Iterable[ExtractedContentItem]) -> Dict[ContentType, List[ExtractedContentItem]]:
        grouped: Dict[ContentType, List[ExtractedContentItem]] = {}
        for item in items:
            grouped.setdefault(item.type, []).append(item)
        return grouped

    @staticmethod
    def filter_by_type(items: Iterable[ExtractedContentItem], content_type: ContentType) -> List[ExtractedContentItem]:
        return [item for item in items if item.type == content_type]
