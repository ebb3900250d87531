"""Task API endpoints."""

from fastapi import APIRouter, HTTPException, status

from taskboard.api.deps import DBSession, Events
from taskboard.models.task import SetCompletion, TaskCreate, TaskResponse
from taskboard.services.tasks import (
    TaskNotFoundError,
    TaskValidationError,
    create_task,
    delete_task,
    list_tasks,
    set_task_completion,
)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("", response_model=list[TaskResponse])
def list_tasks_endpoint(session: DBSession) -> list[TaskResponse]:
    """List all tasks, pending first and newest first within each group."""
    return [TaskResponse.model_validate(t) for t in list_tasks(session)]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(
    session: DBSession,
    events: Events,
    task_data: TaskCreate,
) -> TaskResponse:
    """Create a new task."""
    try:
        task = create_task(session, task_data.title, events)
    except TaskValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return TaskResponse.model_validate(task)


@router.patch("/{task_id}", response_model=TaskResponse)
def set_task_completion_endpoint(
    session: DBSession,
    events: Events,
    task_id: int,
    update: SetCompletion,
) -> TaskResponse:
    """Mark a task completed or pending."""
    try:
        task = set_task_completion(session, task_id, update.completed, events)
    except TaskNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_endpoint(
    session: DBSession,
    events: Events,
    task_id: int,
) -> None:
    """Delete a task."""
    if not delete_task(session, task_id, events):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
