from enum import Enum
from typing import Final, Literal, Union

from .task import Task


class TaskFilter(Enum):
    ALL = ("all", "●")
    ACTIVE = ("active", "○")
    COMPLETED = ("completed", "✓")

    @property
    def name_value(self) -> str:
        return self.value[0]

    @property
    def icon(self) -> str:
        return self.value[1]

    @classmethod
    def from_string(cls, value: Union[str, "TaskFilter"]) -> "TaskFilter":
        if isinstance(value, TaskFilter):
            return value
        token = normalize_filter_name(value)
        for flt in cls:
            if flt.name_value == token:
                return flt
        raise ValueError(f"Invalid task filter: {value!r}")

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


TaskFilterName = Literal["all", "active", "completed"]

_CANONICAL_NAMES: Final[frozenset[str]] = frozenset({"all", "active", "completed"})


def normalize_filter_name(value: str) -> str:
    """Normalize filter input to its canonical name.

    Unknown tokens are returned lowercased so callers can report them.
    """
    return (value or "").strip().lower()


def is_filter_name(value: str) -> bool:
    return normalize_filter_name(value) in _CANONICAL_NAMES
