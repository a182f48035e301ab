"""Base model classes for the classroom assistant."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


class AssistantBaseModel(BaseModel):
    """Base model with common configuration for all classroom assistant models."""

    model_config = ConfigDict(
        # Keep enum objects in memory, serialize values only when needed
        use_enum_values=False,
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        extra="forbid",
    )


class TimestampedModel(AssistantBaseModel):
    """Base model for entities with a creation timestamp."""

    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the entity was created"
    )
