"""Content classification models for AI-generated lecture notes."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict

from pydantic import ConfigDict, Field, field_validator

from .base import TimestampedModel


class ContentType(str, Enum):
    """Kind of fragment extracted from an AI response."""

    TOPIC = "topic"
    QUESTION = "question"

    @property
    def display_name(self) -> str:
        """Human-readable label."""
        return self.value.capitalize()


class ExtractedContentItem(TimestampedModel):
    """A classified fragment of AI output.

    Items compare and hash by ``content`` and ``type``; the timestamp only
    records when the item was produced.
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Trimmed, non-empty fragment text")
    type: ContentType = Field(description="Topic or question")

    @field_validator("content")
    @classmethod
    def _strip_content(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("content must not be empty")
        return stripped

    @property
    def display_text(self) -> str:
        """Text shown to the user."""
        return self.content

    @property
    def type_name(self) -> str:
        """Display name of the item's type."""
        return self.type.display_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary for persistence."""
        return {
            "content": self.content,
            "type": self.type.value,
            "displayText": self.display_text,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractedContentItem":
        """Rebuild an item from ``to_dict`` output.

        Unknown stored types fall back to ``topic``.
        """
        try:
            content_type = ContentType(data.get("type"))
        except ValueError:
            content_type = ContentType.TOPIC

        kwargs: Dict[str, Any] = {"content": data["content"], "type": content_type}
        if data.get("timestamp"):
            kwargs["timestamp"] = datetime.fromisoformat(data["timestamp"])
        return cls(**kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtractedContentItem):
            return NotImplemented
        return self.content == other.content and self.type == other.type

    def __hash__(self) -> int:
        return hash((self.content, self.type))
