"""Modal confirmation and alert dialogs for TUI.

Implements the controller's ``UserPrompts`` port on top of an event loop that
cannot block. ``confirm`` answers "no" the first time and opens the dialog;
accepting it grants that exact message and replays the action, so the second
``confirm`` call returns True and the action completes.
"""

from typing import Callable, List, Optional

from prompt_toolkit.formatted_text import FormattedText

from core import ValidationError


class ModalPromptsMixin:
    """Mixin providing blocking-style prompts for TUI."""

    modal_kind: Optional[str]
    modal_title: str
    modal_lines: List[str]
    _modal_replay: Optional[Callable[[], None]]
    _granted_confirmation: Optional[str]
    _current_action: Optional[Callable[[], None]]

    @property
    def modal_active(self) -> bool:
        return bool(getattr(self, "modal_kind", None))

    # -------------------- UserPrompts port --------------------
    def confirm(self, message: str) -> bool:
        if self._granted_confirmation is not None and self._granted_confirmation == message:
            self._granted_confirmation = None
            return True
        self._open_modal("confirm", self._t("CONFIRM_TITLE"), [message], replay=self._current_action)
        return False

    def notify(self, message: str) -> None:
        self._open_modal("alert", self._t("ALERT_TITLE"), [message])

    # -------------------- action runner --------------------
    def run_action(self, action: Callable[[], None]) -> None:
        """Run a controller call, surfacing validation failures as alerts."""
        previous = self._current_action
        self._current_action = action
        try:
            action()
        except ValidationError as exc:
            self.controller.report(exc)
        finally:
            self._current_action = previous
            self._granted_confirmation = None

    # -------------------- dialog state --------------------
    def _open_modal(self, kind: str, title: str, lines: List[str], replay: Optional[Callable[[], None]] = None) -> None:
        self.modal_kind = kind
        self.modal_title = title
        self.modal_lines = list(lines)
        self._modal_replay = replay
        self.force_render()

    def _close_modal(self) -> None:
        self.modal_kind = None
        self.modal_title = ""
        self.modal_lines = []
        self._modal_replay = None
        if self.controller.editing_id is not None:
            self.schedule_after_render(self._focus_edit_field)
        else:
            self.force_render()

    def modal_accept(self) -> None:
        kind = self.modal_kind
        replay = self._modal_replay
        message = self.modal_lines[0] if self.modal_lines else ""
        self._close_modal()
        if kind == "confirm" and callable(replay):
            self._granted_confirmation = message
            self.run_action(replay)

    def modal_cancel(self) -> None:
        self._close_modal()

    def get_modal_text(self) -> FormattedText:
        if not self.modal_active:
            return FormattedText([])
        hint_key = "CONFIRM_HINT" if self.modal_kind == "confirm" else "ALERT_HINT"
        width = max([self._display_width(self.modal_title)] + [self._display_width(line) for line in self.modal_lines] + [self._display_width(self._t(hint_key))])
        border = "+" + "-" * (width + 2) + "+"
        parts = [("class:dialog.border", border + "\n")]
        rows = [("class:dialog.title", self.modal_title), ("", "")]
        rows.extend(("class:dialog", line) for line in self.modal_lines)
        rows.extend([("", ""), ("class:text.dim", self._t(hint_key))])
        for style, text in rows:
            parts.append(("class:dialog.border", "| "))
            parts.append((style, self._pad_display(text, width)))
            parts.append(("class:dialog.border", " |\n"))
        parts.append(("class:dialog.border", border))
        return FormattedText(parts)


__all__ = ["ModalPromptsMixin"]
