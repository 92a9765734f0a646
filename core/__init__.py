from .errors import (
    TaskListError,
    ValidationError,
    StoreCorruptionError,
    EMPTY_TASK,
    NOTHING_TO_CLEAR,
)
from .task import Task, TaskId, new_task_id
from .task_filter import TaskFilter, normalize_filter_name, is_filter_name

__all__ = [
    "Task",
    "TaskId",
    "new_task_id",
    "TaskFilter",
    "normalize_filter_name",
    "is_filter_name",
    # Errors
    "TaskListError",
    "ValidationError",
    "StoreCorruptionError",
    "EMPTY_TASK",
    "NOTHING_TO_CLEAR",
]
