"""Application-level task list controller.

Owns the in-memory list (newest first), the filter selection and the edit
cursor. Every operation mutates, persists when data changed, then notifies
listeners so the view can redraw from scratch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple, Union

from application.ports import TaskListStore, UserPrompts
from core import EMPTY_TASK, NOTHING_TO_CLEAR, Task, TaskFilter, TaskId, ValidationError
from interface.i18n import Translator


logger = logging.getLogger("tasklist.controller")

Listener = Callable[[], None]


@dataclass
class TodoState:
    tasks: List[Task] = field(default_factory=list)
    task_filter: TaskFilter = TaskFilter.ALL
    editing_id: Optional[TaskId] = None


@dataclass(frozen=True)
class TaskCounts:
    total: int
    active: int
    completed: int


class TodoController:
    def __init__(
        self,
        store: TaskListStore,
        prompts: UserPrompts,
        *,
        state: Optional[TodoState] = None,
        language: Optional[str] = None,
    ):
        self.store = store
        self.prompts = prompts
        self._t = Translator(language)
        self.language = self._t.lang
        # The store is read once; afterwards it only receives writes.
        self.state: TodoState = state if state is not None else TodoState(tasks=list(store.load()))
        self._listeners: List[Listener] = []
        logger.debug("controller started with %s tasks", len(self.state.tasks))

    # -------------------- listeners --------------------
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _persist(self) -> None:
        self.store.save(self.state.tasks)
        logger.debug("persisted %s tasks", len(self.state.tasks))

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self.state.tasks)

    @property
    def task_filter(self) -> TaskFilter:
        return self.state.task_filter

    @property
    def editing_id(self) -> Optional[TaskId]:
        return self.state.editing_id

    def find(self, task_id: TaskId) -> Optional[Task]:
        for task in self.state.tasks:
            if task.id == task_id:
                return task
        return None

    def visible_tasks(self) -> Iterator[Task]:
        """Tasks matching the current filter, in list order.

        A fresh generator on every call; nothing is cached.
        """
        flt = self.state.task_filter
        return (task for task in self.state.tasks if flt.matches(task))

    def counts(self) -> TaskCounts:
        total = len(self.state.tasks)
        completed = sum(1 for t in self.state.tasks if t.completed)
        return TaskCounts(total=total, active=total - completed, completed=completed)

    # -------------------- mutations --------------------
    def add(self, raw_text: str) -> Task:
        text = (raw_text or "").strip()
        if not text:
            raise ValidationError(EMPTY_TASK, context="add")
        task = Task.new(text, existing_ids=(t.id for t in self.state.tasks))
        self.state.tasks.insert(0, task)
        self._persist()
        logger.debug("added task %s", task.id)
        self._changed()
        return task

    def delete(self, task_id: TaskId) -> bool:
        task = self.find(task_id)
        if task is None:
            return False
        if not self.prompts.confirm(self._t("CONFIRM_DELETE", text=task.text)):
            return False
        self.state.tasks = [t for t in self.state.tasks if t.id != task_id]
        if self.state.editing_id == task_id:
            self.state.editing_id = None
        self._persist()
        logger.debug("deleted task %s", task_id)
        self._changed()
        return True

    def toggle_complete(self, task_id: TaskId) -> Optional[Task]:
        task = self.find(task_id)
        if task is None:
            return None
        task.toggle()
        self._persist()
        logger.debug("task %s completed=%s", task_id, task.completed)
        self._changed()
        return task

    def begin_edit(self, task_id: TaskId) -> None:
        if self.find(task_id) is None:
            return
        self.state.editing_id = task_id
        self._changed()

    def commit_edit(self, task_id: TaskId, new_text: str) -> Optional[Task]:
        """Set the text of task_id and close the edit.

        Empty text raises and leaves the cursor in place. When task_id no longer
        exists the cursor is cleared anyway, so the UI never keeps an edit row
        open for a task that is gone; nothing is persisted in that case.
        """
        text = (new_text or "").strip()
        if not text:
            raise ValidationError(EMPTY_TASK, context="edit")
        task = self.find(task_id)
        if self.state.editing_id == task_id:
            self.state.editing_id = None
        if task is None:
            self._changed()
            return None
        task.text = text
        self._persist()
        logger.debug("edited task %s", task_id)
        self._changed()
        return task

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self._changed()

    def clear_completed(self) -> int:
        count = sum(1 for t in self.state.tasks if t.completed)
        if count == 0:
            raise ValidationError(NOTHING_TO_CLEAR, context="clear")
        if not self.prompts.confirm(self._t("CONFIRM_CLEAR_COMPLETED", count=count)):
            return 0
        self.state.tasks = [t for t in self.state.tasks if not t.completed]
        if self.state.editing_id is not None and self.find(self.state.editing_id) is None:
            self.state.editing_id = None
        self._persist()
        logger.debug("cleared %s completed tasks", count)
        self._changed()
        return count

    def set_filter(self, name: Union[str, TaskFilter]) -> TaskFilter:
        self.state.task_filter = TaskFilter.from_string(name)
        self._changed()
        return self.state.task_filter

    # -------------------- feedback --------------------
    def report(self, error: ValidationError) -> None:
        """Show a validation failure through the notification port."""
        logger.info("validation failed: %s", error.reason)
        self.prompts.notify(self._t(error.message_key))


__all__ = ["TodoController", "TodoState", "TaskCounts"]
