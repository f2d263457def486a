"""Pydantic models for recorded event streams (one JSON object per line)."""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from powerbi_reporter.events import EventKind
from powerbi_reporter.models.base import Model


class RecordedItem(Model):
    """An item of the recorded collection, with its enclosing folder."""

    name: str
    parent_item: "RecordedItem | None" = Field(default=None, alias="parent")

    def parent(self) -> "RecordedItem | None":
        """Return the enclosing folder, or None for top-level items."""
        return self.parent_item


class RecordedCursor(Model):
    """Iteration cursor at the time of the event."""

    cycles: int = 1
    iteration: int = 0


class RecordedResponse(Model):
    """Response timing and size."""

    response_time: float = Field(..., alias="responseTime")
    response_size: int = Field(..., alias="responseSize")


class RecordedError(Model):
    """Error attached to an event, such as a failed assertion."""

    name: str = "Error"
    message: str = ""

    def __str__(self) -> str:
        return f"{self.name}: {self.message}" if self.message else self.name


class RecordedArgs(Model):
    """Union of the event-specific arguments found in recordings."""

    item: RecordedItem | None = None
    cursor: RecordedCursor | None = None
    response: RecordedResponse | None = None
    assertion: str = ""


class RecordedEvent(Model):
    """A single lifecycle event as it was emitted."""

    event: EventKind
    error: RecordedError | None = None
    args: RecordedArgs = Field(default_factory=RecordedArgs)
    timestamp: datetime | None = Field(
        default=None, description="When the event was emitted, if recorded"
    )

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        """Treat timestamps without an offset as UTC."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
