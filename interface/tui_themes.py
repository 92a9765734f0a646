#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",  # no forced background
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "task.done": "#6d717a strike",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.done": "bg:#3b3b3b #97a0a9 strike",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "filter": "#97a0a9",
        "filter.active": "reverse #ffb347 bold",
        "counter": "#d7dfe6",
        "icon.check": "#9ad974 bold",
        "icon.empty": "#97a0a9",
        "control": "#7fb4ca",
        "control.delete": "#e06c75",
        "input": "#d7dfe6",
        "input.prompt": "#ffb347 bold",
        "editing": "bg:#2e3440 #e8eaec",
        "placeholder": "#6d717a italic",
        "dialog": "#e8eaec",
        "dialog.title": "#ffb347 bold",
        "dialog.border": "#ffb347",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "task.done": "#6f757d strike",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.done": "bg:#3d4047 #a7b0ba strike",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "filter": "#a7b0ba",
        "filter.active": "reverse #b8f171 bold",
        "counter": "#e8eaec",
        "icon.check": "#b8f171 bold",
        "icon.empty": "#a7b0ba",
        "control": "#8fd3ff",
        "control.delete": "#ff6b6b",
        "input": "#e8eaec",
        "input.prompt": "#b8f171 bold",
        "editing": "bg:#30343b #ffffff",
        "placeholder": "#6f757d italic",
        "dialog": "#ffffff",
        "dialog.title": "#b8f171 bold",
        "dialog.border": "#b8f171",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
