"""Rendering helpers for TodoListTUI.

Everything here is a pure function of the values passed in: the same task
projection, edit cursor and filter always produce the same fragments.
Mouse handlers are optional extras attached as a third tuple element.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Task, TaskFilter, TaskId
from interface.tui_display import DisplayMixin

Translate = Callable[..., str]
MouseHandler = Callable[[object], object]

EMPTY_KEYS = {
    TaskFilter.ALL: "EMPTY_ALL",
    TaskFilter.ACTIVE: "EMPTY_ACTIVE",
    TaskFilter.COMPLETED: "EMPTY_COMPLETED",
}

FILTER_LABEL_KEYS = {
    TaskFilter.ALL: "FILTER_ALL",
    TaskFilter.ACTIVE: "FILTER_ACTIVE",
    TaskFilter.COMPLETED: "FILTER_COMPLETED",
}

TOGGLE_DONE = "[x]"
TOGGLE_OPEN = "[ ]"
ROW_INDENT = " "


@dataclass(frozen=True)
class RowView:
    task_id: TaskId
    text: str
    completed: bool
    editing: bool

    @property
    def toggle_glyph(self) -> str:
        return TOGGLE_DONE if self.completed else TOGGLE_OPEN


@dataclass(frozen=True)
class RenderedList:
    placeholder: Optional[str]
    rows: Tuple[RowView, ...]

    @property
    def editing_index(self) -> Optional[int]:
        for idx, row in enumerate(self.rows):
            if row.editing:
                return idx
        return None


def render_task_list(
    visible: Iterable[Task],
    editing_id: Optional[TaskId],
    task_filter: TaskFilter,
    translate: Translate,
) -> RenderedList:
    rows = tuple(
        RowView(task_id=t.id, text=t.text, completed=t.completed, editing=(editing_id is not None and t.id == editing_id))
        for t in visible
    )
    if not rows:
        return RenderedList(placeholder=translate(EMPTY_KEYS[task_filter]), rows=())
    return RenderedList(placeholder=None, rows=rows)


def _with_handler(style: str, text: str, handler: Optional[MouseHandler]):
    if handler is None:
        return (style, text)
    return (style, text, handler)


def row_prefix_fragments(row: RowView, *, selected: bool = False, on_toggle: Optional[MouseHandler] = None) -> List[tuple]:
    base = "class:selected" if selected else ""
    icon_style = "class:icon.check" if row.completed else "class:icon.empty"
    return [
        (base, ROW_INDENT),
        _with_handler(f"{base} {icon_style}".strip(), row.toggle_glyph, on_toggle),
        (base, " "),
    ]


def row_text_fragments(
    row: RowView,
    width: int,
    *,
    selected: bool = False,
    on_select: Optional[MouseHandler] = None,
) -> List[tuple]:
    if selected:
        style = "class:selected.done" if row.completed else "class:selected"
    else:
        style = "class:task.done" if row.completed else "class:text"
    return [_with_handler(style, DisplayMixin._pad_display(row.text, max(1, width)), on_select)]


def row_action_fragments(
    translate: Translate,
    *,
    selected: bool = False,
    on_edit: Optional[MouseHandler] = None,
    on_delete: Optional[MouseHandler] = None,
) -> List[tuple]:
    base = "class:selected" if selected else ""
    return [
        (base, " "),
        _with_handler(f"{base} class:control".strip(), translate("BTN_EDIT"), on_edit),
        (base, " "),
        _with_handler(f"{base} class:control.delete".strip(), translate("BTN_DELETE"), on_delete),
        (base, " "),
    ]


def actions_width(translate: Translate) -> int:
    return DisplayMixin._display_width(translate("BTN_EDIT")) + DisplayMixin._display_width(translate("BTN_DELETE")) + 3


def prefix_width() -> int:
    return len(ROW_INDENT) + len(TOGGLE_OPEN) + 1


def render_counters(counts, translate: Translate) -> FormattedText:
    """Total/active/completed counters; ``counts`` always covers the full list."""
    return FormattedText(
        [
            ("class:counter", translate("COUNTER_TOTAL", count=counts.total)),
            ("class:text.dim", " | "),
            ("class:counter", translate("COUNTER_ACTIVE", count=counts.active)),
            ("class:text.dim", " | "),
            ("class:counter", translate("COUNTER_COMPLETED", count=counts.completed)),
        ]
    )


def render_filter_tabs(
    task_filter: TaskFilter,
    translate: Translate,
    on_select: Optional[Callable[[TaskFilter], MouseHandler]] = None,
) -> FormattedText:
    parts: List[tuple] = []
    for idx, flt in enumerate(TaskFilter, start=1):
        style = "class:filter.active" if flt is task_filter else "class:filter"
        label = f" {idx} {translate(FILTER_LABEL_KEYS[flt])} "
        handler = on_select(flt) if on_select else None
        parts.append(_with_handler(style, label, handler))
        parts.append(("", " "))
    return FormattedText(parts)


def rows_to_fragments(
    rows: Iterable[RowView],
    width: int,
    translate: Translate,
    *,
    selected_index: Optional[int] = None,
    index_offset: int = 0,
    handlers_for: Optional[Callable[[RowView, int], dict]] = None,
) -> FormattedText:
    """Static rows (no edit field), one line per task."""
    text_width = max(1, width - prefix_width() - actions_width(translate))
    parts: List[tuple] = []
    for idx, row in enumerate(rows, start=index_offset):
        selected = selected_index is not None and idx == selected_index
        handlers = handlers_for(row, idx) if handlers_for else {}
        parts.extend(row_prefix_fragments(row, selected=selected, on_toggle=handlers.get("toggle")))
        parts.extend(row_text_fragments(row, text_width, selected=selected, on_select=handlers.get("select")))
        parts.extend(
            row_action_fragments(
                translate,
                selected=selected,
                on_edit=handlers.get("edit"),
                on_delete=handlers.get("delete"),
            )
        )
        parts.append(("", "\n"))
    if parts:
        parts.pop()
    return FormattedText(parts)


def placeholder_fragments(placeholder: str) -> FormattedText:
    return FormattedText([("class:placeholder", f"{ROW_INDENT}{placeholder}")])


__all__ = [
    "RowView",
    "RenderedList",
    "render_task_list",
    "render_counters",
    "render_filter_tabs",
    "rows_to_fragments",
    "placeholder_fragments",
    "row_prefix_fragments",
    "row_text_fragments",
    "row_action_fragments",
    "actions_width",
    "prefix_width",
]
