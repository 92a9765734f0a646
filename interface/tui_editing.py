"""Editing mode mixin for TUI."""

from typing import TYPE_CHECKING, Callable, List, Optional

from core import TaskId, ValidationError

if TYPE_CHECKING:
    from prompt_toolkit.application import Application
    from prompt_toolkit.layout import Container
    from prompt_toolkit.widgets import TextArea

    from application.todo_controller import TodoController


class EditingMixin:
    """Mixin providing inline editing operations for TUI.

    Focus is handed to the edit field from an ``after_render`` callback, so the
    field is guaranteed to be part of the drawn layout when it is focused.
    Leaving the field (Tab, mouse click elsewhere) commits like Enter does.
    """

    controller: "TodoController"
    edit_field: "TextArea"
    list_window: "Container"
    app: Optional["Application"]
    _post_render_callbacks: List[Callable[[], None]]
    _edit_had_focus: bool

    # -------------------- deferred work --------------------
    def schedule_after_render(self, callback: Callable[[], None]) -> None:
        """Run callback once, after the next render pass completes."""
        self._post_render_callbacks.append(callback)
        self.force_render()

    def _on_after_render(self, _sender=None) -> None:
        self._watch_edit_focus()
        pending, self._post_render_callbacks = self._post_render_callbacks, []
        for callback in pending:
            callback()

    # -------------------- edit lifecycle --------------------
    def start_editing(self, task_id: TaskId) -> None:
        """Enter edit mode for task_id, committing any other open edit first."""
        current = self.controller.editing_id
        if current is not None and current == task_id:
            # Already open: keep the typed text, just take focus back.
            self.schedule_after_render(self._focus_edit_field)
            return
        if not self.blur_edit():
            return
        task = self.controller.find(task_id)
        if task is None:
            return
        self._edit_had_focus = False
        self.edit_field.buffer.text = task.text
        self.edit_field.buffer.cursor_position = len(task.text)
        self.controller.begin_edit(task_id)
        self.schedule_after_render(self._focus_edit_field)

    def save_edit(self) -> bool:
        """Commit the edit field into the task under the cursor.

        Returns False when the text was rejected; the cursor then stays set.
        """
        task_id = self.controller.editing_id
        if task_id is None:
            return True
        had_focus = self._edit_field_focused()
        try:
            self.controller.commit_edit(task_id, self.edit_field.buffer.text)
        except ValidationError as exc:
            self._edit_had_focus = False
            self.controller.report(exc)
            return False
        self._edit_had_focus = False
        if had_focus:
            self._focus_list()
        return True

    def blur_edit(self) -> bool:
        """Commit an open edit because another control was used.

        Returns False when the text was rejected; the caller must then leave
        everything else untouched.
        """
        if self.controller.editing_id is None:
            return True
        return self.save_edit()

    def cancel_edit(self) -> None:
        """Leave edit mode without touching the task."""
        had_focus = self._edit_field_focused()
        self._edit_had_focus = False
        self.controller.cancel_edit()
        self.edit_field.buffer.text = ""
        if had_focus:
            self._focus_list()

    # -------------------- focus tracking --------------------
    def _edit_field_focused(self) -> bool:
        app = getattr(self, "app", None)
        if not app:
            return False
        try:
            return app.layout.has_focus(self.edit_field)
        except ValueError:
            return False

    def _focus_edit_field(self) -> None:
        if self.controller.editing_id is None or self.modal_active:
            return
        app = getattr(self, "app", None)
        if not app:
            return
        app.layout.focus(self.edit_field)
        self.force_render()

    def _focus_list(self) -> None:
        app = getattr(self, "app", None)
        if not app or self.modal_active:
            return
        if self.controller.editing_id is not None:
            # The list window is swapped out while a row is being edited.
            self._focus_edit_field()
            return
        app.layout.focus(self.list_window)

    def _watch_edit_focus(self) -> None:
        if self.modal_active or self.controller.editing_id is None:
            return
        if self._edit_field_focused():
            self._edit_had_focus = True
        elif self._edit_had_focus:
            self._edit_had_focus = False
            self.save_edit()


__all__ = ["EditingMixin"]
