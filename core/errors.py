"""Error taxonomy for the task list.

A missing task id is not an error: mutations targeting an id that is gone
are silent no-ops.
"""

from typing import Optional

EMPTY_TASK = "empty task"
NOTHING_TO_CLEAR = "nothing to clear"


class TaskListError(Exception):
    """Base class for task list failures."""


class ValidationError(TaskListError):
    """User input failed a precondition; state is left unchanged."""

    def __init__(self, reason: str, context: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.context = context or ""

    @property
    def message_key(self) -> str:
        if self.reason == NOTHING_TO_CLEAR:
            return "ERROR_NOTHING_TO_CLEAR"
        if self.context == "edit":
            return "ERROR_EMPTY_TASK_EDIT"
        return "ERROR_EMPTY_TASK_ADD"


class StoreCorruptionError(TaskListError):
    """A stored value exists but is not a valid task list."""

    def __init__(self, key: str, detail: str):
        super().__init__(f"{key}: {detail}")
        self.key = key
        self.detail = detail
