"""Event type definitions for the task lifecycle."""

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from taskboard.models.task import utcnow


class EventType(str, Enum):
    """Task lifecycle transitions."""

    TASK_CREATED = "task.created"
    TASK_COMPLETED = "task.completed"
    TASK_REOPENED = "task.reopened"
    TASK_DELETED = "task.deleted"


class TaskEventData(BaseModel):
    """Payload published on the event bus for every lifecycle transition."""

    event_id: UUID = Field(default_factory=uuid4, description="Unique event identifier")
    event_type: EventType = Field(description="Lifecycle transition")
    task_id: int = Field(description="ID of the task the event is about")
    timestamp: datetime = Field(
        default_factory=utcnow,
        description="Event timestamp (UTC)",
    )
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Event-specific payload data",
    )

    def to_log_dict(self) -> dict[str, Any]:
        """Flatten into ``extra`` fields for structured logging."""
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type.value,
            "task_id": self.task_id,
            "time": self.timestamp.isoformat() + "Z",
            **self.data,
        }
