"""Services module.

Services:
- tasks.py: Task store operations with lifecycle event publishing
"""

from taskboard.services.tasks import (
    TaskNotFoundError,
    TaskStoreError,
    TaskValidationError,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    set_task_completion,
)

__all__ = [
    "TaskNotFoundError",
    "TaskStoreError",
    "TaskValidationError",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "set_task_completion",
]
