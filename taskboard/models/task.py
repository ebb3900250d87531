"""Task entity model."""

from datetime import datetime, timezone

from pydantic import NaiveDatetime, StrictBool, field_serializer
from sqlalchemy import Index
from sqlmodel import Field, SQLModel

TITLE_MAX_LENGTH = 100


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way timestamps are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(SQLModel, table=True):
    """Task database model.

    ``completed_at`` is set iff ``completed`` is true; the task service keeps
    the two columns in step on every write.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_completed_created_at", "completed", "created_at"),
        # Deleted ids are never handed out again
        {"sqlite_autoincrement": True},
    )

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    completed: bool = Field(default=False)
    created_at: NaiveDatetime = Field(default_factory=utcnow)
    completed_at: NaiveDatetime | None = Field(default=None)


class TaskCreate(SQLModel):
    """Schema for task creation."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)


class SetCompletion(SQLModel):
    """Schema for the only supported task update: marking it done or pending."""

    completed: StrictBool


class TaskResponse(SQLModel):
    """Schema for task response."""

    id: int
    title: str
    completed: bool
    created_at: datetime = Field(alias="createdAt")
    completed_at: datetime | None = Field(default=None, alias="completedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}

    @field_serializer("created_at", "completed_at")
    def serialize_timestamp(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat() + "Z"
