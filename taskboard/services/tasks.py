"""Task service: the authoritative store for task records.

Every operation touches exactly one row inside one transaction. Ordering of
``list_tasks`` is decided here and nowhere else.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from taskboard.events.bus import EventBus
from taskboard.events.types import EventType, TaskEventData
from taskboard.models.task import TITLE_MAX_LENGTH, Task, utcnow

logger = logging.getLogger(__name__)


class TaskNotFoundError(Exception):
    """Raised when a task is not found."""
    pass


class TaskValidationError(Exception):
    """Raised when task validation fails."""
    pass


class TaskStoreError(Exception):
    """Raised when the persistence layer fails.

    The message is safe to show to clients; the original error is chained.
    """
    pass


@contextmanager
def _store_operation(session: Session, message: str) -> Iterator[None]:
    """Translate database failures into ``TaskStoreError``."""
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(message, extra={"error": str(e)}, exc_info=True)
        raise TaskStoreError(message) from e


def _publish(
    events: EventBus | None,
    event_type: EventType,
    task_id: int,
    data: dict | None = None,
) -> None:
    if events is None:
        return
    events.publish(TaskEventData(event_type=event_type, task_id=task_id, data=data or {}))


def validate_title(title: str) -> str:
    """Check a task title against the boundary rules.

    Raises:
        TaskValidationError: If the title is empty or too long
    """
    if not title:
        raise TaskValidationError("Title cannot be empty")
    if len(title) > TITLE_MAX_LENGTH:
        raise TaskValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters"
        )
    return title


def list_tasks(session: Session) -> list[Task]:
    """Get every task, pending before completed, newest first within each group."""
    query = select(Task).order_by(
        Task.completed.asc(),
        Task.created_at.desc(),
        Task.id.desc(),
    )
    with _store_operation(session, "Failed to fetch tasks"):
        return list(session.exec(query).all())


def get_task(session: Session, task_id: int) -> Task | None:
    """Get a specific task by ID."""
    with _store_operation(session, "Failed to fetch task"):
        return session.get(Task, task_id)


def create_task(
    session: Session,
    title: str,
    events: EventBus | None = None,
) -> Task:
    """Create a new pending task.

    Args:
        session: Database session
        title: Task title, 1 to 100 characters
        events: Bus that receives the ``task.created`` event

    Returns:
        Task: The created task with its generated id and timestamp

    Raises:
        TaskValidationError: If the title is empty or too long
        TaskStoreError: If the task could not be persisted
    """
    task = Task(title=validate_title(title))
    with _store_operation(session, "Failed to create task"):
        session.add(task)
        session.commit()
        session.refresh(task)

    logger.info("Task created", extra={"task_id": task.id})
    _publish(events, EventType.TASK_CREATED, task.id, {"title": task.title})
    return task


def set_task_completion(
    session: Session,
    task_id: int,
    completed: bool,
    events: EventBus | None = None,
) -> Task:
    """Mark a task completed or pending.

    Marking a task completed stamps ``completed_at`` with the current time,
    also when it was already completed. Marking it pending clears the stamp.

    Raises:
        TaskNotFoundError: If no task has this id; nothing is modified
        TaskStoreError: If the update could not be persisted
    """
    with _store_operation(session, "Failed to update task"):
        task = session.get(Task, task_id)
        if task is None:
            raise TaskNotFoundError(f"Task {task_id} not found")

        task.completed = completed
        task.completed_at = utcnow() if completed else None
        session.add(task)
        session.commit()
        session.refresh(task)

    logger.info(
        "Task completion set",
        extra={"task_id": task.id, "completed": task.completed},
    )
    _publish(
        events,
        EventType.TASK_COMPLETED if completed else EventType.TASK_REOPENED,
        task.id,
        {"completed": task.completed},
    )
    return task


def delete_task(
    session: Session,
    task_id: int,
    events: EventBus | None = None,
) -> bool:
    """Permanently delete a task.

    Returns:
        bool: True if a task was removed, False if no task had this id
    """
    with _store_operation(session, "Failed to delete task"):
        task = session.get(Task, task_id)
        if task is None:
            return False

        session.delete(task)
        session.commit()

    logger.info("Task deleted", extra={"task_id": task_id})
    _publish(events, EventType.TASK_DELETED, task_id)
    return True
