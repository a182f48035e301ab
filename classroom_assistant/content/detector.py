"""Line-level classification of AI output into topics and questions."""

import re
from typing import Optional

from ..models.content import ContentType

# Optional "-" bullet, then a case-sensitive label.
_LABEL_PATTERN = re.compile(r"^(?:-\s*)?(TOPIC|QUESTION):")

_LABEL_TYPES = {
    "TOPIC": ContentType.TOPIC,
    "QUESTION": ContentType.QUESTION,
}

INTERROGATIVE_WORDS = (
    "what", "how", "why", "when", "where", "who", "which",
    "is", "are", "does", "do", "can", "could", "would",
)

_INTERROGATIVE_PATTERN = re.compile(
    r"^(?:" + "|".join(INTERROGATIVE_WORDS) + r")(?=\s)",
    re.IGNORECASE,
)


class ContentTypeDetector:
    """Stateless helpers that read ``TOPIC:`` / ``QUESTION:`` labels."""

    @staticmethod
    def detect_from_line(line: str) -> Optional[ContentType]:
        """Type named by the line's label, or None when it has no label.

        Handles both ``TOPIC: x`` and ``- TOPIC: x``.
        """
        match = _LABEL_PATTERN.match(line.strip())
        if not match:
            return None
        return _LABEL_TYPES[match.group(1)]

    @staticmethod
    def extract_content(line: str) -> str:
        """Line text without bullet and label, trimmed."""
        trimmed = line.strip()
        match = _LABEL_PATTERN.match(trimmed)
        if not match:
            return trimmed
        return trimmed[match.end():].strip()

    @staticmethod
    def detect_from_content(text: str) -> ContentType:
        """Fallback for unlabeled text.

        Questions end with ``?`` or start with an interrogative word followed
        by whitespace; everything else is a topic.
        """
        stripped = text.strip()
        if stripped.endswith("?") or _INTERROGATIVE_PATTERN.match(stripped):
            return ContentType.QUESTION
        return ContentType.TOPIC
