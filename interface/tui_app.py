#!/usr/bin/env python3
"""Full-screen task list built on prompt_toolkit."""

import logging
import os
from typing import Any, Callable, Dict, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.containers import Container, DynamicContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEvent, MouseEventType
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from application.ports import TaskListStore
from application.todo_controller import TodoController
from core import TaskFilter
from interface.i18n import Translator
from interface.tui_render import (
    RenderedList,
    RowView,
    actions_width,
    placeholder_fragments,
    prefix_width,
    render_counters,
    render_filter_tabs,
    render_task_list,
    row_action_fragments,
    row_prefix_fragments,
    rows_to_fragments,
)
from .tui_display import DisplayMixin
from .tui_editing import EditingMixin
from .tui_prompts import ModalPromptsMixin
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("tasklist.tui")

FILTER_KEYS = {"1": TaskFilter.ALL, "2": TaskFilter.ACTIVE, "3": TaskFilter.COMPLETED}


def _on_click(callback: Callable[[], None]):
    def handler(mouse_event: MouseEvent):
        if mouse_event.event_type == MouseEventType.MOUSE_UP:
            callback()
            return None
        return NotImplemented

    return handler


class TodoListTUI(DisplayMixin, EditingMixin, ModalPromptsMixin):
    @staticmethod
    def get_theme_palette(theme: str) -> Dict[str, str]:
        from .tui_themes import get_theme_palette as _get_theme_palette
        return _get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        store: Optional[TaskListStore] = None,
        *,
        controller: Optional[TodoController] = None,
        theme: str = DEFAULT_THEME,
        language: Optional[str] = None,
        input: Any = None,
        output: Any = None,
    ):
        self.app: Optional[Application] = None
        self._t = Translator(language)
        self.language = self._t.lang
        self.theme_name = theme
        self.selected_index = 0

        # Modal dialog (confirm/alert)
        self.modal_kind: Optional[str] = None
        self.modal_title: str = ""
        self.modal_lines = []
        self._modal_replay = None
        self._granted_confirmation: Optional[str] = None
        self._current_action = None

        # Editing mode
        self._post_render_callbacks = []
        self._edit_had_focus = False

        if controller is None:
            if store is None:
                raise ValueError("TodoListTUI needs a store or a controller")
            controller = TodoController(store, prompts=self, language=self.language)
        else:
            controller.prompts = self
        self.controller = controller
        self.controller.add_listener(self.force_render)

        self.style = self.build_style(theme)

        self.input_field = TextArea(
            multiline=False,
            wrap_lines=False,
            style="class:input",
            accept_handler=self._accept_new_task,
        )
        self.edit_field = TextArea(
            multiline=False,
            wrap_lines=False,
            style="class:editing",
            accept_handler=self._accept_edit,
        )
        self.list_control = FormattedTextControl(self.get_task_list_text, focusable=True, show_cursor=False)
        self.list_window = Window(content=self.list_control, always_hide_cursor=True, wrap_lines=False)
        self.modal_window = Window(content=FormattedTextControl(self.get_modal_text), always_hide_cursor=True)

        kb = self._build_key_bindings()

        input_row = VSplit(
            [
                Window(
                    content=FormattedTextControl(lambda: [("class:input.prompt", f" {self._t('INPUT_PLACEHOLDER')} › ")]),
                    dont_extend_width=True,
                    height=1,
                ),
                self.input_field,
                Window(
                    content=FormattedTextControl(lambda: [("class:control", f" {self._t('BTN_ADD')} ", _on_click(self.submit_input))]),
                    dont_extend_width=True,
                    height=1,
                ),
            ],
            height=1,
        )
        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.filter_bar = Window(content=FormattedTextControl(self.get_filter_text), height=1, always_hide_cursor=True)
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True)
        self.body_container = DynamicContainer(self._resolve_body_container)

        root = HSplit(
            [
                self.status_bar,
                input_row,
                self.filter_bar,
                Window(height=1, char="─", style="class:border"),
                self.body_container,
                self.footer,
            ]
        )

        app_kwargs: Dict[str, Any] = {}
        if input is not None:
            app_kwargs["input"] = input
        if output is not None:
            app_kwargs["output"] = output
        self.app = Application(
            layout=Layout(root, focused_element=self.list_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=True,
            **app_kwargs,
        )
        self.app.after_render += self._on_after_render
        # Escape must not wait for the rest of an ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TASKLIST_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

        warning = getattr(store, "last_load_warning", None) if store is not None else None
        if warning:
            self.notify(self._t("STORE_RESET_WARNING", backup=getattr(store, "backup_key", "")))

    # -------------------- key bindings --------------------
    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        kb.timeout = 0

        modal_active = Condition(lambda: self.modal_active)
        confirm_active = Condition(lambda: self.modal_kind == "confirm")
        list_focused = ~modal_active & Condition(lambda: self._has_focus(self.list_window))
        input_focused = ~modal_active & Condition(lambda: self._has_focus(self.input_field))
        editing_focused = ~modal_active & Condition(lambda: self._edit_field_focused())

        @kb.add(Keys.Any, eager=True, filter=modal_active)
        def _(event):
            """Modal swallow: dialogs block other input until dismissed."""
            return

        @kb.add("enter", eager=True, filter=modal_active)
        @kb.add("y", eager=True, filter=confirm_active)
        def _(event):
            self.modal_accept()

        @kb.add("escape", eager=True, filter=modal_active)
        @kb.add("n", eager=True, filter=confirm_active)
        def _(event):
            self.modal_cancel()

        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add("q", filter=list_focused)
        def _(event):
            event.app.exit()

        @kb.add("down", filter=list_focused)
        @kb.add("j", filter=list_focused)
        def _(event):
            self.move_selection(1)

        @kb.add("up", filter=list_focused)
        @kb.add("k", filter=list_focused)
        def _(event):
            self.move_selection(-1)

        @kb.add("space", filter=list_focused)
        def _(event):
            row = self._selected_row()
            if row:
                self.toggle_task(row.task_id)

        @kb.add("e", filter=list_focused)
        @kb.add("enter", filter=list_focused)
        def _(event):
            row = self._selected_row()
            if row:
                self.start_editing(row.task_id)

        @kb.add("x", filter=list_focused)
        @kb.add("delete", filter=list_focused)
        def _(event):
            row = self._selected_row()
            if row:
                self.delete_task(row.task_id)

        @kb.add("C", filter=list_focused)
        def _(event):
            self.clear_completed()

        for key, flt in FILTER_KEYS.items():

            @kb.add(key, filter=list_focused)
            def _(event, flt=flt):
                self.set_filter(flt)

        @kb.add("a", filter=list_focused)
        @kb.add("i", filter=list_focused)
        @kb.add("tab", filter=list_focused)
        def _(event):
            event.app.layout.focus(self.input_field)

        @kb.add("escape", eager=True, filter=input_focused)
        @kb.add("tab", filter=input_focused)
        def _(event):
            self._focus_list()

        @kb.add("escape", eager=True, filter=editing_focused)
        def _(event):
            self.cancel_edit()

        @kb.add("tab", filter=editing_focused)
        @kb.add("s-tab", filter=editing_focused)
        def _(event):
            # Moving focus away is a blur: the after-render watcher commits.
            event.app.layout.focus(self.input_field)

        return kb

    def _has_focus(self, value) -> bool:
        if not self.app:
            return False
        try:
            return self.app.layout.has_focus(value)
        except ValueError:
            return False

    # -------------------- actions --------------------
    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def _accept_new_task(self, _buffer) -> bool:
        self.submit_input()
        return True

    def _accept_edit(self, _buffer) -> bool:
        self.save_edit()
        return True

    def submit_input(self) -> bool:
        """Add the input field's text as a new task; clears the field on success."""
        if not self.blur_edit():
            return False
        added = []

        def action():
            added.append(self.controller.add(self.input_field.text))

        self.run_action(action)
        if added:
            self.input_field.text = ""
            self.selected_index = 0
        return bool(added)

    # Every control below counts as "clicking elsewhere" for an open edit.
    def toggle_task(self, task_id) -> None:
        if not self.blur_edit():
            return
        self.run_action(lambda: self.controller.toggle_complete(task_id))

    def delete_task(self, task_id) -> None:
        if not self.blur_edit():
            return
        self.run_action(lambda: self.controller.delete(task_id))

    def clear_completed(self) -> None:
        if not self.blur_edit():
            return
        self.run_action(self.controller.clear_completed)

    def set_filter(self, task_filter: TaskFilter) -> None:
        if not self.blur_edit():
            return
        self.run_action(lambda: self.controller.set_filter(task_filter))
        self.selected_index = 0

    def move_selection(self, delta: int) -> None:
        total = len(self.render_list().rows)
        if not total:
            self.selected_index = 0
            return
        self.selected_index = max(0, min(total - 1, self.selected_index + delta))
        self.force_render()

    def select_index(self, index: int) -> None:
        if not self.blur_edit():
            return
        self.selected_index = index
        self._focus_list()
        self.force_render()

    def run(self) -> None:
        logger.info("starting TUI (theme=%s, lang=%s, tasks=%s)", self.theme_name, self.language, len(self.controller.tasks))
        self.app.run()
        logger.info("TUI exited")

    # -------------------- rendering --------------------
    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def render_list(self) -> RenderedList:
        ctl = self.controller
        return render_task_list(ctl.visible_tasks(), ctl.editing_id, ctl.task_filter, self._t)

    def _clamp_selection(self, total: int) -> None:
        if total <= 0:
            self.selected_index = 0
        elif self.selected_index >= total:
            self.selected_index = total - 1

    def _selected_row(self) -> Optional[RowView]:
        rows = self.render_list().rows
        self._clamp_selection(len(rows))
        if not rows:
            return None
        return rows[self.selected_index]

    def _row_handlers(self, row: RowView, index: int) -> Dict[str, Callable]:
        return {
            "toggle": _on_click(lambda: self.toggle_task(row.task_id)),
            "select": _on_click(lambda: self.select_index(index)),
            "edit": _on_click(lambda: self.start_editing(row.task_id)),
            "delete": _on_click(lambda: self.delete_task(row.task_id)),
        }

    def get_task_list_text(self) -> FormattedText:
        rendered = self.render_list()
        if rendered.placeholder is not None:
            return placeholder_fragments(rendered.placeholder)
        self._clamp_selection(len(rendered.rows))
        return rows_to_fragments(
            rendered.rows,
            self.get_terminal_width(),
            self._t,
            selected_index=self.selected_index,
            handlers_for=self._row_handlers,
        )

    def _resolve_body_container(self) -> Container:
        if self.modal_active:
            return self.modal_window
        rendered = self.render_list()
        idx = rendered.editing_index
        if idx is None:
            return self.list_window
        width = self.get_terminal_width()
        before = rendered.rows[:idx]
        after = rendered.rows[idx + 1:]
        row = rendered.rows[idx]
        handlers = self._row_handlers(row, idx)
        parts = []
        if before:
            parts.append(
                Window(
                    content=FormattedTextControl(
                        rows_to_fragments(before, width, self._t, handlers_for=self._row_handlers)
                    ),
                    height=len(before),
                    always_hide_cursor=True,
                )
            )
        prefix = row_prefix_fragments(row, on_toggle=handlers["toggle"])
        actions = row_action_fragments(self._t, on_edit=handlers["edit"], on_delete=handlers["delete"])
        parts.append(
            VSplit(
                [
                    Window(content=FormattedTextControl(prefix), width=prefix_width(), height=1),
                    self.edit_field,
                    Window(content=FormattedTextControl(actions), width=actions_width(self._t), height=1),
                ],
                height=1,
            )
        )
        if after:
            parts.append(
                Window(
                    content=FormattedTextControl(
                        rows_to_fragments(
                            after,
                            width,
                            self._t,
                            index_offset=idx + 1,
                            handlers_for=self._row_handlers,
                        )
                    ),
                    always_hide_cursor=True,
                )
            )
        else:
            parts.append(Window())
        return HSplit(parts)

    def get_status_text(self) -> FormattedText:
        parts = [("class:header", f" {self._t('APP_TITLE')} "), ("class:text.dim", "| ")]
        parts.extend(render_counters(self.controller.counts(), self._t))
        return FormattedText(parts)

    def get_filter_text(self) -> FormattedText:
        parts = [("", " ")]
        parts.extend(
            render_filter_tabs(
                self.controller.task_filter,
                self._t,
                on_select=lambda flt: _on_click(lambda: self.set_filter(flt)),
            )
        )
        parts.append(("class:control.delete", self._t("BTN_CLEAR_COMPLETED"), _on_click(self.clear_completed)))
        return FormattedText(parts)

    def get_footer_text(self) -> FormattedText:
        if self._edit_field_focused():
            key = "FOOTER_KEYS_EDITING"
        elif self._has_focus(self.input_field):
            key = "FOOTER_KEYS_INPUT"
        else:
            key = "FOOTER_KEYS"
        return FormattedText([("class:text.dim", f" {self._t(key)}")])

