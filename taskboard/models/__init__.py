"""SQLModel entities and wire schemas for the Task Board."""

from taskboard.models.task import (
    TITLE_MAX_LENGTH,
    SetCompletion,
    Task,
    TaskCreate,
    TaskResponse,
)

__all__ = [
    "TITLE_MAX_LENGTH",
    "Task",
    "TaskCreate",
    "SetCompletion",
    "TaskResponse",
]
